import enum

from rich.pretty import pprint

from helpwright import *


class Level(enum.Enum):
    quiet = 0
    normal = 1
    loud = 2


tool = RootCommand(
    "Copies files between locations.",
    Option("--verbosity", "-v", type=Level, default=Level.normal, descr="How much to report", recursive=True),
    Command(
        "copy", "Copy files.",
        Argument("source", "File to copy"),
        Argument("targets", "Destinations", type=list[str]),
        Option("--force", "-f", type=bool, descr="Overwrite existing files"),
        aliases=("cp",),
    ),
    Command("sync", "Mirror a directory.", Argument("directory", default="."), strict=False),
    name="tool",
)


if __name__ == '__main__':
    pprint(tool)
    print_help(tool)
    print_help(tool.subcommands[0])
