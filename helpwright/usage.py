"""
Usage line synthesis.

format_usage(command) builds the single line shown under "Usage:", walking the
command's ancestors from the root down:

    outer [<outer-args>...] inner [<inner-args>...] [command] [options] [<additional arguments>]

- every command of the path contributes its name, then the usage fragment of
  its own non-hidden arguments (an argument shared with an ancestor is shown
  again at each level that declares it);
- "[command]" when the target has a visible subcommand;
- "[options]" when the target has a visible option, or any command of the path
  has a visible recursive option;
- "[<additional arguments>]" when the target is not strict.

format_arguments(arguments) renders the fragment of one level:
- required arguments (minimum arity > 0) as "<name>";
- optional ones (minimum arity 0) opened with "[", every bracket closed at the
  end, so consecutive optional arguments nest: "[<a> [<b>]]";
- a "..." suffix when an argument takes more than one value.
"""
from .resources import getstring


def format_arguments(arguments, /):
    """
    Usage fragment for the non-hidden arguments of one command.
    """
    tokens = []
    closing = 0

    for argument in arguments:
        if argument.hidden:
            continue

        token = f"<{argument.name}>" + ("..." if argument.arity.maximum > 1 else "")
        if argument.arity.minimum == 0:
            token = "[" + token
            closing += 1
        tokens.append(token)

    return " ".join(tokens) + "]" * closing


def format_usage(command, /):
    """
    Usage line for command: space-joined tokens, blank tokens dropped.
    """
    tokens = []
    recursive = False

    for step in command.path:
        recursive = recursive or any(option.recursive and not option.hidden for option in step.options)
        tokens.append(step.name)
        if step.arguments:
            tokens.append(format_arguments(step.arguments))

    if any(not subcommand.hidden for subcommand in command.subcommands):
        tokens.append(getstring("usage-command"))

    if recursive or any(not option.hidden for option in command.options):
        tokens.append(getstring("usage-options"))

    if not command.strict:
        tokens.append(getstring("usage-additional-arguments"))

    return " ".join(token for token in tokens if token and not token.isspace())


__all__ = (
    "format_arguments",
    "format_usage",
)
