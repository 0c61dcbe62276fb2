import pytest
from traceability.errors import ExceptionalError, FailedResultAccess
from traceability.reason import Error, Reason, Success
from traceability.result import Result, fail, ok, try_result, try_result_async
from hypothesis import given
from hypothesis.strategies import builds, booleans, text, integers


results = builds(lambda b, t, i: ok(i) if b else fail(t),
                 booleans(), text(min_size=1), integers())


@given(results)
def test_result(r):
    assert (r and isinstance(r.value, int)) or (not r and r.is_failed and len(r.errors) == 1)


@given(text())
def test_fail_from_message(msg):
    r = fail(msg)
    assert r.is_failed
    assert r.errors[0].message == msg


def test_fail_rejects_other_types():
    with pytest.raises(TypeError):
        fail(42)  # type: ignore


def test_value_of_failed_result():
    r = fail("nope")
    with pytest.raises(FailedResultAccess) as e:
        r.value
    assert "nope" in str(e.value)


def test_reason_views():
    r = ok(1).with_reason(Reason("r")).with_success("s").with_error("e")
    assert [str(x) for x in r.reasons] == ["r", "s", "e"]
    assert [str(x) for x in r.successes] == ["s"]
    assert [str(x) for x in r.errors] == ["e"]
    assert r.is_failed


def test_views_are_read_only():
    r = fail("e").with_success("s")
    assert isinstance(r.errors, tuple)
    assert isinstance(r.successes, tuple)
    with pytest.raises(AttributeError):
        r.errors.append(Error("lost"))  # type: ignore
    r.with_errors([Error("kept")])
    assert [e.message for e in r.errors] == ["e", "kept"]


def test_plain_reasons_and_successes_do_not_fail():
    r = ok().with_reasons([Reason("a"), Success("b")])
    assert r.is_success
    assert r.value is None


def test_str():
    r = Result([Error("Test failure"), Reason("context")])
    assert str(r) == "Result: is_success=False, reasons=[Error: Test failure, Reason: context]"


def test_try_result_captures_exception():
    def boom():
        raise ValueError("boom")

    r = try_result(boom)
    assert r.is_failed
    [err] = r.errors
    assert isinstance(err, ExceptionalError)
    assert isinstance(err.exception, ValueError)
    assert err.message == "boom"


def test_try_result_passes_arguments():
    r = try_result(lambda x, *, y: x + y, 3, y=4)
    assert r and r.value == 7


def test_try_result_does_not_capture_base_exceptions():
    def leave():
        raise KeyboardInterrupt()

    with pytest.raises(KeyboardInterrupt):
        try_result(leave)


@pytest.mark.asyncio
async def test_try_result_async():
    async def answer():
        return 42

    async def boom():
        raise RuntimeError("async boom")

    assert (await try_result_async(answer)).value == 42
    r = await try_result_async(boom)
    assert r.is_failed
    assert r.errors[0].message == "async boom"
