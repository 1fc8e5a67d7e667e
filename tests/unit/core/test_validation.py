"""Unit tests for name and TTL validation."""

import pytest
from eha.core.validation import (
    EmptyLabel,
    InvalidLabelChar,
    InvalidSuffix,
    TtlOutOfRange,
    ValidationError,
    check_name,
    check_ttl,
    validate_name,
    validate_request,
    validate_ttl,
)
from eha.models.request import AddRequest, PruneRequest, RemoveRequest


class TestCheckNameSuffix:
    """Tests for the allowed-suffix rule."""

    @pytest.mark.parametrize(
        "name",
        ["a.local", "a.localhost", "thing.local", "api.my-app.localhost", "x1.y2.local"],
    )
    def test_valid_names(self, name: str) -> None:
        """Names with an allowed suffix and valid labels pass."""
        assert check_name(name) is None

    @pytest.mark.parametrize("name", ["a.com", "", "local", "a.local.", "a.locals", "a.LOCAL"])
    def test_invalid_suffix(self, name: str) -> None:
        """Names without an allowed suffix fail first."""
        assert check_name(name) == InvalidSuffix(name)

    def test_suffix_checked_before_labels(self) -> None:
        """A bad suffix wins over bad labels."""
        assert check_name("-bad..com") == InvalidSuffix("-bad..com")


class TestCheckNameLabels:
    """Tests for per-label rules."""

    @pytest.mark.parametrize(
        ("name", "index"),
        [(".local", 0), ("a..local", 1), ("a.b..localhost", 2)],
    )
    def test_empty_label(self, name: str, index: int) -> None:
        """Empty labels report their index."""
        assert check_name(name) == EmptyLabel(index)

    def test_empty_label_wins_over_bad_char(self) -> None:
        """Empty-label check runs over the whole name before character checks."""
        assert check_name("a_b..local") == EmptyLabel(1)

    def test_63_character_label_passes(self) -> None:
        """Labels of exactly 63 characters are allowed."""
        assert check_name("a" * 63 + ".local") is None

    def test_64_character_label_fails(self) -> None:
        """Labels longer than 63 characters fail."""
        problem = check_name("a" * 64 + ".local")

        assert isinstance(problem, InvalidLabelChar)
        assert problem.label_index == 0
        assert problem.char_index == 63

    def test_leading_hyphen(self) -> None:
        """A label cannot start with a hyphen."""
        problem = check_name("-a.local")

        assert isinstance(problem, InvalidLabelChar)
        assert (problem.label_index, problem.char_index, problem.char) == (0, 0, "-")

    def test_trailing_hyphen(self) -> None:
        """A label cannot end with a hyphen."""
        problem = check_name("ok.a-.local")

        assert isinstance(problem, InvalidLabelChar)
        assert (problem.label_index, problem.char_index, problem.char) == (1, 1, "-")

    def test_inner_hyphen_passes(self) -> None:
        """Hyphens inside a label are fine."""
        assert check_name("a-b.local") is None

    @pytest.mark.parametrize(
        ("name", "label_index", "char_index", "char"),
        [
            ("a_b.local", 0, 1, "_"),
            ("ok.b c.local", 1, 1, " "),
            ("café.local", 0, 3, "é"),
            ("x.y*.localhost", 1, 1, "*"),
        ],
    )
    def test_invalid_char(self, name: str, label_index: int, char_index: int, char: str) -> None:
        """Characters outside ASCII alphanumerics and hyphen fail."""
        assert check_name(name) == InvalidLabelChar(label_index, char_index, char)

    def test_message_names_location(self) -> None:
        """Problem messages include the label, position and character."""
        problem = check_name("a_b.local")

        assert problem is not None
        assert "#0" in problem.message
        assert "@ 1" in problem.message
        assert "'_'" in problem.message


class TestCheckTtl:
    """Tests for TTL range checks."""

    @pytest.mark.parametrize("minutes", [1, 60, 1440, 525600])
    def test_in_range(self, minutes: int) -> None:
        """Values in [1, 525600] pass."""
        assert check_ttl(minutes) is None

    @pytest.mark.parametrize("minutes", [0, -1, 525601])
    def test_out_of_range(self, minutes: int) -> None:
        """Values outside [1, 525600] fail."""
        assert check_ttl(minutes) == TtlOutOfRange(minutes)


class TestValidateRaising:
    """Tests for the raising validate_* wrappers."""

    def test_validate_name_raises(self) -> None:
        """validate_name raises ValidationError carrying the problem."""
        with pytest.raises(ValidationError) as exc_info:
            validate_name("a.com")

        assert exc_info.value.problem == InvalidSuffix("a.com")
        assert "must end in .local or .localhost" in str(exc_info.value)

    def test_validate_ttl_raises(self) -> None:
        """validate_ttl raises ValidationError for out-of-range values."""
        with pytest.raises(ValidationError, match="ttl minutes"):
            validate_ttl(0)

    def test_validate_request_add_checks_name_then_ttl(self) -> None:
        """Add requests report a bad name before a bad TTL."""
        with pytest.raises(ValidationError) as exc_info:
            validate_request(AddRequest(name="a.com", ttl_minutes=0))

        assert isinstance(exc_info.value.problem, InvalidSuffix)

    def test_validate_request_add_checks_ttl(self) -> None:
        """Add requests with a valid name still need a valid TTL."""
        with pytest.raises(ValidationError) as exc_info:
            validate_request(AddRequest(name="a.local", ttl_minutes=525601))

        assert exc_info.value.problem == TtlOutOfRange(525601)

    def test_validate_request_remove_checks_name(self) -> None:
        """Remove requests validate the name."""
        with pytest.raises(ValidationError):
            validate_request(RemoveRequest(name="bad_name.local"))

    def test_validate_request_prune_passes(self) -> None:
        """Prune requests have nothing to validate."""
        validate_request(PruneRequest())
