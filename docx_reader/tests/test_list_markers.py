"""Tests for render-time list markers and counters."""
import unittest

from docx_reader.model.elements import ListItemElement
from docx_reader.model.numbering_model import ListCounters, ListStyle
from docx_reader.renderer.list_markers import list_marker, to_letters, to_roman
from docx_reader.utils.glyphs import DEFAULT_BULLET


def item(list_id: int, level: int = 0) -> ListItemElement:
    return ListItemElement(text="entry", level=level, list_id=list_id)


class ListCountersTest(unittest.TestCase):
    """Counter store semantics."""

    def test_next_and_advance_starts_at_one(self) -> None:
        counters = ListCounters()
        self.assertEqual(counters.next_and_advance(1, 0), 1)
        self.assertEqual(counters.next_and_advance(1, 0), 2)
        self.assertEqual(counters.next_and_advance(2, 0), 1)
        self.assertEqual(counters.peek(1, 0), 3)

    def test_clear_deeper_only_touches_deeper_levels_of_same_list(self) -> None:
        counters = ListCounters()
        for key in [(1, 0), (1, 1), (1, 2), (2, 1)]:
            counters.next_and_advance(*key)

        counters.clear_deeper(1, 0)

        self.assertEqual(counters.snapshot(), {(1, 0): 2, (2, 1): 2})


class ListMarkerTest(unittest.TestCase):
    """Marker formatting for every supported numbering format."""

    def setUp(self) -> None:
        self.counters = ListCounters()
        self.definitions = {
            1: {0: ListStyle("decimal", "."), 1: ListStyle("decimal", ".")},
            2: {0: ListStyle("lowerLetter", ")"), 1: ListStyle("upperLetter", ".")},
            3: {0: ListStyle("lowerRoman", "."), 1: ListStyle("upperRoman", ".")},
            4: {0: ListStyle("bullet", "o"), 1: ListStyle("bullet", "\uf0a8"), 2: ListStyle("bullet", " ")},
            5: {0: ListStyle("ordinalText", "."), 1: ListStyle("decimal", ".")},
        }

    def marker(self, list_id: int, level: int = 0) -> str:
        return list_marker(item(list_id, level), self.definitions, self.counters)

    def test_decimal_counts_up(self) -> None:
        self.assertEqual(self.marker(1), "1.")
        self.assertEqual(self.marker(1), "2.")

    def test_returning_to_outer_level_restarts_deeper_counter(self) -> None:
        self.assertEqual(self.marker(1), "1.")
        self.assertEqual(self.marker(1), "2.")
        self.assertEqual(self.marker(1, 1), "1.")
        self.assertEqual(self.marker(1, 1), "2.")
        self.assertEqual(self.marker(1), "3.")
        self.assertEqual(self.marker(1, 1), "1.")

    def test_letters(self) -> None:
        self.assertEqual([self.marker(2) for _ in range(3)], ["a.", "b.", "c."])
        self.assertEqual(self.marker(2, 1), "A.")

    def test_roman(self) -> None:
        self.assertEqual([self.marker(3) for _ in range(4)], ["i.", "ii.", "iii.", "iv."])
        self.assertEqual(self.marker(3, 1), "I.")

    def test_bullets_use_level_glyph(self) -> None:
        self.assertEqual(self.marker(4), "o")
        self.assertEqual(self.marker(4, 1), "◦")
        self.assertEqual(self.marker(4, 2), DEFAULT_BULLET)
        self.assertEqual(len(self.counters), 0)

    def test_unknown_format_is_bullet_but_still_resets_deeper(self) -> None:
        self.marker(5, 1)
        self.marker(5, 1)
        self.assertEqual(self.counters.snapshot(), {(5, 1): 3})

        self.assertEqual(self.marker(5), DEFAULT_BULLET)

        self.assertEqual(self.counters.snapshot(), {})
        self.assertEqual(self.marker(5, 1), "1.")

    def test_unknown_list_or_level_is_bullet_without_counter_access(self) -> None:
        self.counters.next_and_advance(1, 3)

        self.assertEqual(self.marker(99), DEFAULT_BULLET)
        self.assertEqual(self.marker(1, 7), DEFAULT_BULLET)
        self.assertEqual(self.counters.snapshot(), {(1, 3): 2})

    def test_no_definitions_bypasses_counters(self) -> None:
        self.counters.next_and_advance(1, 1)

        for level in (0, 1, 2):
            self.assertEqual(list_marker(item(1, level), {}, self.counters), DEFAULT_BULLET)

        self.assertEqual(self.counters.snapshot(), {(1, 1): 2})

    def test_lists_count_independently(self) -> None:
        self.assertEqual(self.marker(1), "1.")
        self.assertEqual(self.marker(2), "a.")
        self.assertEqual(self.marker(1), "2.")
        self.assertEqual(self.marker(2), "b.")


class NumeralConversionTest(unittest.TestCase):
    """Pure numeral helpers."""

    def test_to_roman(self) -> None:
        self.assertEqual(to_roman(4), "IV")
        self.assertEqual(to_roman(9), "IX")
        self.assertEqual(to_roman(14), "XIV")
        self.assertEqual(to_roman(1999), "MCMXCIX")
        self.assertEqual(to_roman(3999), "MMMCMXCIX")

    def test_to_roman_out_of_range(self) -> None:
        self.assertEqual(to_roman(0), "")
        self.assertEqual(to_roman(-3), "")
        self.assertEqual(to_roman(4000), "")

    def test_to_letters(self) -> None:
        self.assertEqual(to_letters(1), "a")
        self.assertEqual(to_letters(26, upper=True), "Z")
        self.assertEqual(to_letters(27), "aa")
        self.assertEqual(to_letters(53), "aaa")
        self.assertEqual(to_letters(0), "")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
