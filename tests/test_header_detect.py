"""Tests for column role detection over the header row."""

from quizimport.header_detect import detect_column_mapping, describe_mapping
from quizimport.synonyms import ColumnRole, role_for_header


class TestRoleForHeader:
    """Tests for role_for_header()."""

    def test_role_for_header_when_turkish_spellings_then_all_roles_found(self):
        assert role_for_header("Soru") is ColumnRole.QUESTION
        assert role_for_header("Tip") is ColumnRole.TYPE
        assert role_for_header("Tür") is ColumnRole.TYPE
        assert role_for_header("Seçenek C") is ColumnRole.OPTION_C
        assert role_for_header("Doğru Cevap") is ColumnRole.CORRECT_ANSWER
        assert role_for_header("Puan") is ColumnRole.POINTS
        assert role_for_header("Açıklama") is ColumnRole.EXPLANATION

    def test_role_for_header_when_english_spellings_then_all_roles_found(self):
        assert role_for_header("Question Text") is ColumnRole.QUESTION
        assert role_for_header("Type") is ColumnRole.TYPE
        assert role_for_header("Option E") is ColumnRole.OPTION_E
        assert role_for_header("Correct Answer") is ColumnRole.CORRECT_ANSWER
        assert role_for_header("Score") is ColumnRole.POINTS
        assert role_for_header("Explanation") is ColumnRole.EXPLANATION

    def test_role_for_header_when_upper_case_turkish_then_dotless_i_folded(self):
        assert role_for_header("AÇIKLAMA") is ColumnRole.EXPLANATION
        assert role_for_header("SORU METNİ") is ColumnRole.QUESTION

    def test_role_for_header_when_letter_inside_word_then_no_option_match(self):
        # option columns are exact matches only
        assert role_for_header("Data") is None
        assert role_for_header("") is None

    def test_role_for_header_when_points_variant_then_exact_match_required(self):
        assert role_for_header("Puanlar") is None


class TestDetectColumnMapping:
    """Tests for detect_column_mapping()."""

    def test_detect_column_mapping_when_full_header_then_indices_assigned(self, turkish_header):
        mapping = detect_column_mapping(turkish_header)

        assert mapping[ColumnRole.QUESTION] == 0
        assert mapping[ColumnRole.TYPE] == 1
        assert mapping[ColumnRole.OPTION_A] == 2
        assert mapping[ColumnRole.OPTION_D] == 5
        assert mapping[ColumnRole.CORRECT_ANSWER] == 6
        assert mapping[ColumnRole.POINTS] == 7
        assert ColumnRole.OPTION_E not in mapping
        assert ColumnRole.EXPLANATION not in mapping

    def test_detect_column_mapping_when_duplicate_role_then_first_column_kept(self):
        mapping = detect_column_mapping(["Soru", "Soru Metni", "Puan", "Score"])

        assert mapping[ColumnRole.QUESTION] == 0
        assert mapping[ColumnRole.POINTS] == 2

    def test_detect_column_mapping_when_no_question_header_then_role_missing(self):
        mapping = detect_column_mapping(["Başlık", "A", "B"])

        assert ColumnRole.QUESTION not in mapping
        assert mapping[ColumnRole.OPTION_B] == 2

    def test_describe_mapping_when_mapped_then_returns_original_headers(self, turkish_header):
        mapping = detect_column_mapping(turkish_header)

        described = describe_mapping(mapping, turkish_header)

        assert described["question"] == "Soru"
        assert described["correct_answer"] == "Doğru Cevap"
        assert "explanation" not in described
