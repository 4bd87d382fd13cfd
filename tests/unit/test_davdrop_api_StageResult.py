"""Unit tests for davdrop.api.StageResult module."""

from collections.abc import Iterator

from davdrop.api.StageResult import StageResult


def test_stage_result_initialization():
    def progress_gen(result: StageResult) -> Iterator[tuple[float, str]]:
        yield (1.0, "Complete")
        result.result = "Done"
        result.output = {"test": True}
        result.success = True

    result = StageResult(announce="Testing", progress_callback=progress_gen)
    assert result.announce == "Testing"
    assert result.result == ""
    assert result.output == {}
    assert result.success is False


def test_stage_result_progress_sets_fields():
    def progress_gen(result: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Halfway")
        yield (1.0, "Complete")
        result.result = "Done"
        result.output = {"count": 2}
        result.success = True

    result = StageResult(announce="Testing", progress_callback=progress_gen)
    steps = list(result.progress_callback(result))
    assert steps == [(0.5, "Halfway"), (1.0, "Complete")]
    assert result.result == "Done"
    assert result.output == {"count": 2}
    assert result.success is True


def test_stage_result_outputs_are_independent():
    a = StageResult(announce="a", progress_callback=lambda r: iter(()))
    b = StageResult(announce="b", progress_callback=lambda r: iter(()))
    a.output["x"] = 1
    assert b.output == {}
