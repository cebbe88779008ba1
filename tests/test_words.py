"""Unit tests for the words module."""

import os
import tempfile
import unittest

from duotrigordle.words import (
    WORD_LENGTH,
    Lexicon,
    load_word_list,
    load_words,
    validate_word,
)


class TestLoading(unittest.TestCase):
    """Reading word lists from disk."""

    def setUp(self) -> None:
        handle = tempfile.NamedTemporaryFile("w", suffix=".txt", delete=False)
        handle.write("Crane\n\n  slate \nat\nbanana\nPILOT\n")
        handle.close()
        self.path = handle.name

    def tearDown(self) -> None:
        os.unlink(self.path)

    def test_load_word_list_strips_and_lowercases(self) -> None:
        self.assertEqual(
            load_word_list(self.path), ["crane", "slate", "at", "banana", "pilot"]
        )

    def test_load_words_keeps_five_letters(self) -> None:
        self.assertEqual(load_words(self.path), ["crane", "slate", "pilot"])

    def test_bundled_list(self) -> None:
        words = load_words()
        self.assertGreaterEqual(len(set(words)), 32)
        self.assertTrue(all(len(w) == WORD_LENGTH for w in words))


class TestValidateWord(unittest.TestCase):

    def test_accepts_five(self) -> None:
        self.assertEqual(validate_word("crane"), "crane")

    def test_rejects_other_lengths(self) -> None:
        for word in ("", "cran", "cranes"):
            with self.assertRaises(ValueError):
                validate_word(word)


class TestLexicon(unittest.TestCase):

    def setUp(self) -> None:
        self.lexicon = Lexicon(["crane", "slate", "crane", "pilot"])

    def test_chars_shape_and_codes(self) -> None:
        self.assertEqual(self.lexicon.chars.shape, (4, WORD_LENGTH))
        self.assertEqual(self.lexicon.chars[1].tolist(), [ord(c) for c in "slate"])

    def test_chars_read_only(self) -> None:
        with self.assertRaises(ValueError):
            self.lexicon.chars[0, 0] = 0

    def test_index_of_first_occurrence(self) -> None:
        self.assertEqual(self.lexicon.index_of("crane"), 0)
        self.assertEqual(self.lexicon.index_of("pilot"), 3)

    def test_index_of_missing(self) -> None:
        with self.assertRaises(ValueError):
            self.lexicon.index_of("water")

    def test_distinct(self) -> None:
        self.assertEqual(self.lexicon.distinct(), ["crane", "slate", "pilot"])

    def test_container_protocol(self) -> None:
        self.assertEqual(len(self.lexicon), 4)
        self.assertIn("slate", self.lexicon)
        self.assertNotIn("water", self.lexicon)
        self.assertEqual(list(self.lexicon)[3], "pilot")
        self.assertEqual(self.lexicon.words_at([3, 1]), ["pilot", "slate"])

    def test_rejects_bad_word(self) -> None:
        with self.assertRaises(ValueError):
            Lexicon(["crane", "cran"])


if __name__ == "__main__":
    unittest.main()
