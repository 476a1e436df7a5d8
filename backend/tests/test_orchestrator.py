"""Tests for sequential per-chunk generation and failure tolerance."""
import asyncio

from fakes import FakeGenerator, make_question, model_reply

from config import GenerationSettings
from services import orchestrator as orchestrator_module
from services.aggregator import aggregate
from services.orchestrator import ChunkOrchestrator


def _run(orchestrator, chunks, planned, topics):
    return asyncio.run(orchestrator.run(chunks, planned, topics))


def _orchestrator(generator, delay=0.0):
    return ChunkOrchestrator(GenerationSettings(inter_call_delay=delay), generator=generator)


def test_failed_middle_chunk_is_skipped():
    generator = FakeGenerator(
        model_reply("Part one", [make_question("Q1"), make_question("Q2")]),
        ConnectionError("connection reset"),
        model_reply("Part three", [make_question("Q3")]),
    )
    outcomes = _run(_orchestrator(generator), ["c1", "c2", "c3"], 10, ["Results"])

    assert [o.succeeded for o in outcomes] == [True, False, True]
    assert outcomes[1].error == "connection reset"

    result = aggregate(outcomes, planned_count=10, topics=["Results"], word_count=100, page_count=1)
    assert [q["question"] for q in result.questions] == ["Q1", "Q2", "Q3"]
    assert result.processing_info.chunks_processed == 3
    assert result.processing_info.questions_generated == 3
    assert result.processing_info.chunks_failed == 1


def test_unparseable_replies_are_failed_outcomes():
    generator = FakeGenerator("no json here", '{"questions": [oops]}', model_reply("ok", []))
    outcomes = _run(_orchestrator(generator), ["a", "b", "c"], 5, [])
    assert [o.succeeded for o in outcomes] == [False, False, True]
    assert outcomes[2].summary == "ok"


def test_all_chunks_failing_still_returns_outcomes():
    generator = FakeGenerator(TimeoutError("Deadline exceeded"))
    outcomes = _run(_orchestrator(generator), ["a", "b"], 5, [])
    assert len(outcomes) == 2
    assert not any(o.succeeded for o in outcomes)


def test_prompts_carry_rotating_topic_and_per_chunk_count():
    generator = FakeGenerator(model_reply("s", []))
    _run(_orchestrator(generator), ["first chunk", "second chunk", "third chunk"], 10, ["Alpha", "Beta"])

    assert len(generator.prompts) == 3
    assert all("4 high-quality" in p for p in generator.prompts)
    assert ['"topic": "Alpha"' in p for p in generator.prompts] == [True, False, True]
    assert '"topic": "Beta"' in generator.prompts[1]
    assert '"""second chunk"""' in generator.prompts[1]


def test_delay_between_calls_but_not_after_last(monkeypatch):
    sleeps = []

    async def fake_sleep(seconds):
        sleeps.append(seconds)

    monkeypatch.setattr(orchestrator_module.asyncio, "sleep", fake_sleep)
    generator = FakeGenerator(model_reply("s", []))
    _run(_orchestrator(generator, delay=1.5), ["a", "b", "c"], 5, [])
    assert sleeps == [1.5, 1.5]


def test_no_chunks_means_no_calls():
    generator = FakeGenerator(model_reply("s", []))
    assert _run(_orchestrator(generator), [], 5, []) == []
    assert generator.prompts == []
