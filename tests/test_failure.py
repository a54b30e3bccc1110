"""Tests for the failure taxonomy."""

from forestfilter.models.failure import (
    FailureDetail,
    FailureKind,
    InvalidArgumentError,
    KnownError,
)


class TestInvalidArgumentError:
    def test_is_known_and_value_error(self) -> None:
        error = InvalidArgumentError("Predicate cannot be None")

        assert isinstance(error, KnownError)
        assert isinstance(error, ValueError)
        assert error.kind == FailureKind.INVALID_ARGUMENT
        assert str(error) == "Predicate cannot be None"

    def test_to_detail(self) -> None:
        error = InvalidArgumentError("Sequences must have the same length", detail="2 vs 1")

        detail = error.to_detail()

        assert isinstance(detail, FailureDetail)
        assert detail.model_dump() == {
            "kind": FailureKind.INVALID_ARGUMENT,
            "message": "Sequences must have the same length",
            "detail": "2 vs 1",
        }

    def test_detail_serializes_kind_as_string(self) -> None:
        detail = InvalidArgumentError("Forest view cannot be None").to_detail()

        assert detail.model_dump(mode="json")["kind"] == "invalid_argument"
        assert detail.detail is None
