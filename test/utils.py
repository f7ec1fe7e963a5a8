"""
Helper tests (Unset sentinel, coalesce, rename, mirror).

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from types import MappingProxyType
from unittest import TestCase

from helpwright.utils import Unset, UnsetType, coalesce, mirror, rename


class TestUnset(TestCase):
    """Sentinel behaviour."""

    def testSingleton(self):
        self.assertIs(UnsetType(), Unset)

    def testFalseyAndRepr(self):
        self.assertFalse(Unset)
        self.assertEqual(repr(Unset), "Unset")

    def testUnionWithTypes(self):
        self.assertIsInstance(Unset, str | Unset)
        self.assertIsInstance("text", str | Unset)
        self.assertNotIsInstance(3, str | Unset)

    def testSealed(self):
        with self.assertRaises(TypeError):
            type("Derived", (UnsetType,), {})

    def testCoalesce(self):
        self.assertEqual(coalesce(Unset, 80), 80)
        self.assertIsNone(coalesce(Unset))
        self.assertIsNone(coalesce(None, 80))
        self.assertEqual(coalesce(0, 80), 0)


class TestRename(TestCase):
    """Callable relabelling."""

    def testDirectForm(self):
        function = rename(lambda: None, "relabelled")
        self.assertEqual(function.__name__, "relabelled")
        self.assertEqual(function.__qualname__, "relabelled")

    def testDecoratorForm(self):
        @rename("relabelled")
        def function():
            pass

        self.assertEqual(function.__name__, "relabelled")

    def testMisuse(self):
        with self.assertRaises(TypeError):
            rename("not callable", "name")
        with self.assertRaises(TypeError):
            rename(lambda: None, 3)
        with self.assertRaises(TypeError):
            rename()
        with self.assertRaises(TypeError):
            rename("name")(42)


class TestMirror(TestCase):
    """Read-only container views."""

    class Holder:
        items = mirror("items")
        table = mirror("table")
        flags = mirror("flags")
        label = mirror("label")

        def __init__(self):
            self._items = [1, 2]
            self._table = {"a": 1}
            self._flags = {"x"}
            self._label = "text"

    def testFrozenViews(self):
        holder = self.Holder()
        self.assertEqual(holder.items, (1, 2))
        self.assertIsInstance(holder.table, MappingProxyType)
        self.assertEqual(holder.flags, frozenset({"x"}))
        self.assertEqual(holder.label, "text")

    def testReadOnly(self):
        holder = self.Holder()
        with self.assertRaises(AttributeError):
            holder.items = ()

    def testNameMustBeString(self):
        with self.assertRaises(TypeError):
            mirror(3)


if __name__ == "__main__":
    unittest.main()
