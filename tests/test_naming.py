"""
Unit tests for domain/naming.py.
"""
import re
import unittest

from uitk_string_generator.domain.naming import (
    normalize_to_const_name,
    abbreviate,
    sanitize_free_text,
    make_identifier,
    is_valid_identifier,
)


CONST_NAME = re.compile(r"^[A-Z0-9_]*$")


class TestNormalizeToConstName(unittest.TestCase):
    """Test conversion of raw UI names to UPPER_SNAKE_CASE."""

    def test_kebab_and_camel_case(self):
        self.assertEqual(normalize_to_const_name("myButton-02"), "MY_BUTTON_02")

    def test_kebab_case(self):
        self.assertEqual(normalize_to_const_name("btn-primary"), "BTN_PRIMARY")

    def test_pascal_case(self):
        self.assertEqual(normalize_to_const_name("PlayButton"), "PLAY_BUTTON")

    def test_consecutive_capitals_split_per_letter(self):
        # Each capital starts a new word
        self.assertEqual(normalize_to_const_name("UIRoot"), "U_I_ROOT")

    def test_symbols_are_separators(self):
        self.assertEqual(normalize_to_const_name("my.name"), "MY_NAME")
        self.assertEqual(normalize_to_const_name("My-Name"), "MY_NAME")
        self.assertEqual(normalize_to_const_name("  spaced   out  "), "SPACED_OUT")

    def test_digits_form_their_own_word(self):
        self.assertEqual(normalize_to_const_name("item42name"), "ITEM_42_NAME")

    def test_no_letters_or_digits_gives_empty(self):
        self.assertEqual(normalize_to_const_name(""), "")
        self.assertEqual(normalize_to_const_name("--__--"), "")

    def test_output_alphabet(self):
        for raw in ["a-b_c", "X9y", "héllo wörld", "__Init__", "tab\tsep"]:
            with self.subTest(raw=raw):
                self.assertRegex(normalize_to_const_name(raw), CONST_NAME)

    def test_deterministic(self):
        self.assertEqual(
            normalize_to_const_name("settings-Panel_3"),
            normalize_to_const_name("settings-Panel_3"),
        )

    def test_rejects_non_string(self):
        with self.assertRaises(TypeError):
            normalize_to_const_name(None)


class TestAbbreviate(unittest.TestCase):
    """Test shortening of identifiers that exceed the configured length."""

    def test_short_names_unchanged(self):
        self.assertEqual(abbreviate("PLAY_BUTTON", 20), "PLAY_BUTTON")
        self.assertEqual(abbreviate("PLAY", 4), "PLAY")

    def test_vowel_stripping_when_enough(self):
        self.assertEqual(abbreviate("LOGIN_BUTTON_LABEL", 12), "LGN_BTTN_LBL")

    def test_separators_dropped_when_needed(self):
        self.assertEqual(abbreviate("LOGIN_BUTTON_LABEL", 10), "LGNBTTNLBL")

    def test_truncation_as_last_resort(self):
        result = abbreviate("LOGIN_BUTTON_LABEL", 5)
        self.assertEqual(result, "LGN_B")
        self.assertLessEqual(len(result), 5)
        self.assertTrue(is_valid_identifier(result))

    def test_truncation_trims_trailing_separator(self):
        self.assertEqual(abbreviate("LOGIN_BUTTON_LABEL", 4), "LGN")

    def test_first_letter_of_word_kept(self):
        self.assertEqual(abbreviate("AUDIO_OPTIONS", 9), "AD_OPTNS")

    def test_single_character_limit(self):
        self.assertEqual(abbreviate("SETTINGS", 1), "S")

    def test_deterministic(self):
        self.assertEqual(abbreviate("MAIN_MENU_BACKGROUND", 7), abbreviate("MAIN_MENU_BACKGROUND", 7))

    def test_empty_name(self):
        self.assertEqual(abbreviate("", 5), "")

    def test_only_separators_still_shortened(self):
        self.assertEqual(abbreviate("__", 1), "_")
        self.assertEqual(abbreviate("____", 2), "__")

    def test_invalid_limit(self):
        with self.assertRaises(ValueError):
            abbreviate("NAME", 0)

    def test_always_within_limit(self):
        for limit in range(1, 25):
            with self.subTest(limit=limit):
                result = abbreviate("CHARACTER_SELECTION_SCREEN_TITLE_42", limit)
                self.assertTrue(result)
                self.assertLessEqual(len(result), limit)
                self.assertRegex(result, CONST_NAME)


class TestSanitizeFreeText(unittest.TestCase):
    """Test filtering of user supplied class text."""

    def test_strips_invalid_characters(self):
        self.assertEqual(sanitize_free_text("Main Menu-SS"), "MainMenuSS")

    def test_periods_removed(self):
        self.assertEqual(sanitize_free_text("Game.UI"), "GameUI")

    def test_digits_after_first_letter_kept(self):
        self.assertEqual(sanitize_free_text("9Lives2"), "Lives2")

    def test_underscore_kept(self):
        self.assertEqual(sanitize_free_text("_private ns"), "_privatens")

    def test_non_decimal_digit_characters_removed(self):
        self.assertEqual(sanitize_free_text("Menu²Strings"), "MenuStrings")
        self.assertEqual(sanitize_free_text("½Size"), "Size")

    def test_non_ascii_letters_kept(self):
        self.assertEqual(sanitize_free_text("Menü"), "Menü")

    def test_nothing_valid_returns_empty(self):
        self.assertEqual(sanitize_free_text(""), "")
        self.assertEqual(sanitize_free_text("123 ..."), "")


class TestSanitizeDottedNamespace(unittest.TestCase):
    """Test per-segment sanitization of dotted namespaces."""

    def test_leading_digits_and_periods_removed(self):
        self.assertEqual(sanitize_free_text("12.My Game.UI.", allow_periods=True), "MyGame.UI")

    def test_periods_kept_between_segments(self):
        self.assertEqual(sanitize_free_text("Game.UI", allow_periods=True), "Game.UI")

    def test_empty_segments_dropped(self):
        self.assertEqual(sanitize_free_text("Game..UI", allow_periods=True), "Game.UI")
        self.assertEqual(sanitize_free_text("Game. .UI", allow_periods=True), "Game.UI")

    def test_segment_leading_digit_removed(self):
        self.assertEqual(sanitize_free_text("Game.1UI", allow_periods=True), "Game.UI")

    def test_result_is_qualified_name(self):
        qualified = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*$")
        for raw in ["Game..UI", "Game.1UI", ".a.b.", "x. .y", "1.2.Ok", "My Game.UI"]:
            with self.subTest(raw=raw):
                self.assertRegex(sanitize_free_text(raw, allow_periods=True), qualified)

    def test_nothing_valid_returns_empty(self):
        self.assertEqual(sanitize_free_text("...", allow_periods=True), "")
        self.assertEqual(sanitize_free_text("", allow_periods=True), "")


class TestMakeIdentifier(unittest.TestCase):
    """Test the combined normalize/abbreviate/guard step."""

    def test_plain_name(self):
        self.assertEqual(make_identifier("btn-primary", 20), "BTN_PRIMARY")

    def test_leading_digit_guarded(self):
        self.assertEqual(make_identifier("2nd-button", 20), "_2_ND_BUTTON")

    def test_abbreviated(self):
        self.assertEqual(make_identifier("login-button-label", 5), "LGN_B")

    def test_leading_digit_guard_within_limit(self):
        result = make_identifier("01-intro-screen", 5)
        self.assertEqual(result, "_01_I")
        self.assertLessEqual(len(result), 5)

    def test_leading_digit_guard_with_single_character_limit(self):
        self.assertEqual(make_identifier("42", 1), "_4")

    def test_blank_name(self):
        self.assertEqual(make_identifier("---", 20), "")

    def test_results_are_identifiers(self):
        for raw in ["42", "a", "x-y-z", "Panel.Header", "01-intro"]:
            with self.subTest(raw=raw):
                self.assertTrue(is_valid_identifier(make_identifier(raw, 20)))


if __name__ == "__main__":
    unittest.main()
