"""
Two-column layout tests (measuring, padding, wrapping of both cells).

Conventions
- Test method names follow CamelCase per project convention.
- Output is captured with io.StringIO.
"""

from __future__ import annotations

import io
import unittest
from unittest import TestCase

from helpwright.columns import Row, measure, write_columns


def _render(rows, width, **options):
    output = io.StringIO()
    write_columns(rows, width, output, **options)
    return output.getvalue()


class TestRow(TestCase):
    """Row construction."""

    def testSecondColumnDefaultsToEmpty(self):
        self.assertEqual(Row("<x>"), ("<x>", ""))

    def testColumnsMustBeStrings(self):
        with self.assertRaises(TypeError):
            Row(None, "descr")
        with self.assertRaises(TypeError):
            Row("label", 3)


class TestMeasure(TestCase):
    """Column width computation."""

    def testNaturalWidthsWhenTheyFit(self):
        rows = [Row("-a", "alpha"), Row("--bbb", "beta")]
        self.assertEqual(measure(rows, 80), (5, 5))

    def testSecondColumnTakesRemainingWidth(self):
        rows = [Row("-a, --aaa", "x" * 100)]
        self.assertEqual(measure(rows, 70), (9, 57))

    def testFirstColumnIsRemeasuredAfterWrapping(self):
        rows = [Row("<outer-command-arg>", "The argument")]
        self.assertEqual(measure(rows, 25), (10, 11))


class TestWriteColumns(TestCase):
    """Rendering of aligned rows."""

    def testEmptyRowsWriteNothing(self):
        self.assertEqual(_render([], 80), "")

    def testRowsAreIndentedAndAligned(self):
        rows = [Row("-a", "alpha"), Row("--bbb", "beta")]
        self.assertEqual(_render(rows, 80), "  -a     alpha\n  --bbb  beta\n")

    def testBlankDescriptionHasNoTrailingPadding(self):
        rows = [Row("<short>"), Row("<much-longer>", "described")]
        self.assertEqual(_render(rows, 80), "  <short>\n  <much-longer>  described\n")

    def testBothColumnsWrapAtSmallWidth(self):
        rows = [Row("<outer-command-arg>", "The argument\r\nfor the\ninner command")]
        expected = (
            "  <outer-com  The \n"
            "  mand-arg>   argument\n"
            "              for the\n"
            "              inner \n"
            "              command\n"
        )
        self.assertEqual(_render(rows, 25), expected)

    def testLongLabelsAndDescriptionsWrapTogether(self):
        name = "<argument-name-for-a-command-that-is-long-enough-to-wrap-to-a-new-line>"
        description = "Argument description for a command with line breaks that is long enough to wrap to a new line."
        expected = (
            "  <argument-name-for-a-command-that  Argument description for a \n"
            "  -is-long-enough-to-wrap-to-a-new-  command with line breaks that is \n"
            "  line>                              long enough to wrap to a new \n"
            "                                     line.\n"
        )
        self.assertEqual(_render([Row(name, description)], 70), expected)

    def testCustomIndent(self):
        rows = [Row("-a", "alpha")]
        self.assertEqual(_render(rows, 80, indent=4), "    -a    alpha\n")


if __name__ == "__main__":
    unittest.main()
