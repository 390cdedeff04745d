"""Unit tests for merchant text normalization (pure functions)."""

from pixcode.application.shared.text import normalize_text


class TestNormalizeText:
    """Test normalize_text function."""

    def test_strips_accents_and_uppercases(self) -> None:
        assert normalize_text("São Paulo", 15) == "SAO PAULO"

    def test_removes_symbols_but_keeps_spaces(self) -> None:
        assert normalize_text("Café & Livros, Ltda.", 25) == "CAFE  LIVROS LTDA"

    def test_truncates_to_max_length(self) -> None:
        name = "Livraria Universitaria do Centro Historico"
        result = normalize_text(name, 25)
        assert len(result) == 25
        assert result == "LIVRARIA UNIVERSITARIA DO"

    def test_stripped_characters_do_not_count_against_limit(self) -> None:
        """Truncation happens after removal."""
        assert normalize_text("!!!!!!!!!!ABC", 3) == "ABC"

    def test_empty_input(self) -> None:
        assert normalize_text("", 25) == ""

    def test_all_stripped_input(self) -> None:
        assert normalize_text("@#$%&*", 25) == ""

    def test_non_latin_letters_are_dropped(self) -> None:
        assert normalize_text("Ωmega Straße", 25) == "MEGA STRAE"

    def test_short_input_untouched_by_limit(self) -> None:
        assert normalize_text("Recife", 15) == "RECIFE"
