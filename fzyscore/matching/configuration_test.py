import pytest
from pydantic import ValidationError

from fzyscore.matching.configuration import (
    MatchConfiguration,
    InvalidConfiguration,
    create_configuration,
    is_configuration,
)


class TestCreateConfiguration:
    """Test cases for building configurations."""

    def test_defaults(self):
        config = create_configuration()
        assert config.case_sensitive is False
        assert config.gap_leading_score == -0.005
        assert config.gap_trailing_score == -0.005
        assert config.gap_inner_score == -0.01
        assert config.consecutive_match_score == 1.0
        assert config.slash_match_score == 0.9
        assert config.word_match_score == 0.8
        assert config.capital_match_score == 0.7
        assert config.dot_match_score == 0.6
        assert config.max_match_length == 1024

    def test_partial_overrides(self):
        config = create_configuration({'case_sensitive': True, 'gap_inner_score': -0.02})
        assert config.case_sensitive is True
        assert config.gap_inner_score == -0.02
        assert config.slash_match_score == 0.9

    def test_camel_case_keys(self):
        config = create_configuration({'caseSensitive': True, 'maxMatchLength': 16})
        assert config.case_sensitive is True
        assert config.max_match_length == 16

    def test_keyword_overrides(self):
        config = create_configuration({'word_match_score': 0.1}, dot_match_score=0.2)
        assert config.word_match_score == 0.1
        assert config.dot_match_score == 0.2

    def test_existing_configuration_is_returned(self):
        config = create_configuration()
        assert create_configuration(config) is config

    def test_existing_configuration_with_overrides(self):
        config = create_configuration()
        updated = create_configuration(config, case_sensitive=True)
        assert updated.case_sensitive is True
        assert config.case_sensitive is False

    @pytest.mark.parametrize("partial", [
        "case_sensitive",
        42,
        ['case_sensitive', True],
    ])
    def test_rejects_non_mapping(self, partial):
        with pytest.raises(InvalidConfiguration, match="must be a mapping"):
            create_configuration(partial)

    @pytest.mark.parametrize("value", ["yes", 1, None, "true"])
    def test_rejects_non_boolean_case_sensitive(self, value):
        with pytest.raises(InvalidConfiguration, match="case_sensitive|caseSensitive"):
            create_configuration({'case_sensitive': value})

    @pytest.mark.parametrize("overrides", [
        {'gap_inner_score': float('inf')},
        {'slash_match_score': float('nan')},
        {'dot_match_score': 'high'},
        {'max_match_length': 0},
        {'max_match_length': 2.5},
        {'unknown_score': 1.0},
        {'consecutive_match_score': '1.5'},
        {'slash_match_score': True},
        {'max_match_length': True},
        {'max_match_length': '16'},
        {'max_match_length': 16.0},
    ])
    def test_rejects_invalid_values(self, overrides):
        with pytest.raises(InvalidConfiguration):
            create_configuration(overrides)

    def test_integer_scores_are_accepted(self):
        config = create_configuration({'consecutive_match_score': 2})
        assert config.consecutive_match_score == 2.0

    @pytest.mark.parametrize("changes", [
        {'gap_inner_score': '-0.01'},
        {'word_match_score': True},
        {'max_match_length': 1024.0},
        {'max_match_length': True},
    ])
    def test_agrees_with_is_configuration(self, changes):
        values = create_configuration().model_dump()
        values.update(changes)
        assert is_configuration(values) is False
        with pytest.raises(InvalidConfiguration):
            create_configuration(values)

    def test_invalid_configuration_is_value_error(self):
        with pytest.raises(ValueError):
            create_configuration({'case_sensitive': 'no'})

    def test_configuration_is_frozen(self):
        config = create_configuration()
        with pytest.raises(ValidationError):
            config.case_sensitive = True


class TestIsConfiguration:
    """Test cases for the structural configuration check."""

    def _complete(self, **changes):
        values = create_configuration().model_dump()
        values.update(changes)
        return values

    def test_model_instance(self):
        assert is_configuration(MatchConfiguration()) is True

    def test_complete_mapping(self):
        assert is_configuration(self._complete()) is True

    def test_complete_camel_case_mapping(self):
        assert is_configuration(create_configuration().model_dump(by_alias=True)) is True

    def test_integer_scores_are_numbers(self):
        assert is_configuration(self._complete(consecutive_match_score=1)) is True

    def test_missing_field(self):
        values = self._complete()
        del values['dot_match_score']
        assert is_configuration(values) is False

    @pytest.mark.parametrize("changes", [
        {'case_sensitive': 'false'},
        {'case_sensitive': 0},
        {'gap_inner_score': '-0.01'},
        {'word_match_score': True},
        {'max_match_length': 1024.0},
        {'max_match_length': True},
    ])
    def test_wrong_types(self, changes):
        assert is_configuration(self._complete(**changes)) is False

    @pytest.mark.parametrize("value", [None, "config", 42, []])
    def test_non_mappings(self, value):
        assert is_configuration(value) is False
