"""Tests for parse errors and their rendering."""

import copy
import pickle
import unittest

from feed_tracker.core.errors import ExpectedChar, ExpectedMessage, ParseError, render_diagnostic


class TestParseError(unittest.TestCase):
    """Test cases for ParseError."""

    def test_message(self):
        error = ExpectedMessage("a weekday", 2, (49, 57))
        self.assertEqual(str(error), "a weekday expected at line 2, columns 49-57")

    def test_message_without_span(self):
        self.assertEqual(str(ExpectedMessage("a feed event", 3, None)), "a feed event expected at line 3")

    def test_expected_char(self):
        error = ExpectedChar(">", 1, 4)
        self.assertEqual(error.span, (4, 4))
        self.assertEqual(str(error), "'>' expected at line 1, columns 4-4")

    def test_errors_compare_by_value(self):
        self.assertEqual(ExpectedMessage("digit", 1, 3), ExpectedMessage("digit", 1, (3, 3)))
        self.assertNotEqual(ExpectedMessage("digit", 1, 3), ExpectedMessage("digit", 2, 3))
        self.assertNotEqual(ExpectedChar("d", 1, 3), ExpectedMessage("d", 1, 3))

    def test_is_value_error(self):
        self.assertTrue(issubclass(ParseError, ValueError))

    def test_base_class_cannot_be_raised_directly(self):
        with self.assertRaises(TypeError):
            ParseError(1, None)

    def test_copy_and_pickle(self):
        errors = [
            ExpectedMessage("a weekday", 2, (49, 57)),
            ExpectedMessage("a feed event", 3, None),
            ExpectedChar(">", 1, 4),
        ]
        for error in errors:
            for clone in (copy.copy(error), copy.deepcopy(error), pickle.loads(pickle.dumps(error))):
                with self.subTest(error=error, clone=clone):
                    self.assertIs(type(clone), type(error))
                    self.assertEqual(clone, error)
                    self.assertEqual(str(clone), str(error))
                    self.assertEqual(clone.row, error.row)
                    self.assertEqual(clone.span, error.span)

    def test_render_diagnostic(self):
        source = "first\nbad line here"
        rendered = render_diagnostic(ExpectedMessage("thing", 2, (4, 8)), source)

        self.assertEqual(
            rendered.split("\n"),
            [
                "thing expected at line 2, columns 4-8",
                "  bad line here",
                "      ^^^^",
            ],
        )

    def test_render_diagnostic_out_of_range(self):
        error = ExpectedMessage("thing", 9, None)
        self.assertEqual(render_diagnostic(error, "one line"), str(error))

    def test_render_diagnostic_keeps_tabs(self):
        rendered = render_diagnostic(ExpectedMessage("thing", 1, (2, 5)), "\t\tbad x")

        self.assertEqual(rendered.split("\n")[2], "  \t\t^^^")

    def test_render_diagnostic_point_span(self):
        rendered = render_diagnostic(ExpectedChar(">", 1, 3), "<ab")

        self.assertEqual(rendered.split("\n")[2], "     ^")


if __name__ == "__main__":
    unittest.main()
