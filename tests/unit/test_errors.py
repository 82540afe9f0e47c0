"""Tests for the error hierarchy."""

from seqdiff import (
    ErrorCode,
    SeqDiffApplyError,
    SeqDiffError,
    SeqDiffIdentityError,
)


class TestErrorCodes:

    def test_codes_are_strings(self):
        assert ErrorCode.IDENTITY_ERROR == "IDENTITY_ERROR"
        assert ErrorCode.APPLY_ERROR == "APPLY_ERROR"

    def test_subclasses_carry_codes(self):
        assert SeqDiffIdentityError("m").code == ErrorCode.IDENTITY_ERROR
        assert SeqDiffApplyError("m").code == ErrorCode.APPLY_ERROR

    def test_all_inherit_from_base(self):
        assert issubclass(SeqDiffIdentityError, SeqDiffError)
        assert issubclass(SeqDiffApplyError, SeqDiffError)


class TestErrorContext:

    def test_context_defaults_to_empty_dict(self):
        assert SeqDiffApplyError("bad").context == {}

    def test_message_is_str(self):
        assert str(SeqDiffApplyError("bad script")) == "bad script"

    def test_cause_is_chained(self):
        cause = TypeError("unhashable type: 'set'")
        err = SeqDiffIdentityError("bad identity", cause=cause)
        assert err.cause is cause
        assert err.__cause__ is cause

    def test_repr_includes_context(self):
        err = SeqDiffApplyError("bad", context={"index": 3})
        assert repr(err).startswith("SeqDiffApplyError(code=")
        assert "message='bad'" in repr(err)
        assert "context={'index': 3}" in repr(err)

    def test_repr_without_context(self):
        assert "context" not in repr(SeqDiffApplyError("bad"))
