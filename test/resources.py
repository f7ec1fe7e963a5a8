"""
Localized strings tests (built-in table and host overrides).

Conventions
- Test method names follow CamelCase per project convention.
- Host overrides are patched onto __main__ and restored afterwards.
"""

from __future__ import annotations

import sys
import unittest
from unittest import TestCase, mock

from helpwright import Command, HelpBuilder, HelpOption, Option
from helpwright.resources import STRINGS, getstring


class TestGetString(TestCase):
    """String lookup."""

    def testBuiltinStrings(self):
        self.assertEqual(getstring("usage-title"), "Usage:")
        self.assertEqual(getstring("usage-additional-arguments"), "[<additional arguments>]")
        self.assertEqual(getstring("required-label"), "(REQUIRED)")

    def testTableIsReadOnly(self):
        with self.assertRaises(TypeError):
            STRINGS["usage-title"] = "Synopsis:"

    def testUnknownKey(self):
        with self.assertRaises(KeyError):
            getstring("epilogue-title")

    def testNonStringKey(self):
        with self.assertRaises(TypeError):
            getstring(3)

    def testHostOverride(self):
        with mock.patch.object(sys.modules["__main__"], "__strings__", {"usage-title": "Synopsis:"}, create=True):
            self.assertEqual(getstring("usage-title"), "Synopsis:")
            self.assertEqual(getstring("options-title"), "Options:")


class TestLocalizedHelp(TestCase):
    """Overrides flowing into rendered help."""

    def testHeadingsAndTokensAreLocalized(self):
        strings = {
            "description-title": "Beschreibung:",
            "usage-title": "Verwendung:",
            "options-title": "Optionen:",
            "usage-options": "[Optionen]",
            "required-label": "(ERFORDERLICH)",
        }
        command = Command("werkzeug", "Macht Dinge.", Option("--modus", required=True))
        with mock.patch.object(sys.modules["__main__"], "__strings__", strings, create=True):
            help = HelpBuilder(80).render(command)

        self.assertEqual(
            help,
            "Beschreibung:\n"
            "  Macht Dinge.\n"
            "\n"
            "Verwendung:\n"
            "  werkzeug [Optionen]\n"
            "\n"
            "Optionen:\n"
            "  --modus (ERFORDERLICH)\n"
            "\n",
        )

    def testDefaultValueLabelIsLocalized(self):
        command = Command("werkzeug", "", Option("--stufe", default="hoch"))
        with mock.patch.object(sys.modules["__main__"], "__strings__", {"default-value-label": "Standard"}, create=True):
            self.assertIn("--stufe  [Standard: hoch]", HelpBuilder(80).render(command))

    def testBuiltinOptionDescriptionIsLocalized(self):
        command = Command("werkzeug", "", HelpOption())
        with mock.patch.object(sys.modules["__main__"], "__strings__", {"help-option-description": "Hilfe anzeigen"}, create=True):
            self.assertIn("-?, -h, --help  Hilfe anzeigen", HelpBuilder(80).render(command))


if __name__ == "__main__":
    unittest.main()
