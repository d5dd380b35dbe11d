import asyncio

from flowlang.config import FlowConfig
from flowlang.runtime.objects import FlowError, FlowInteger
from flowlang.service import EvaluationSequencer, FlowService, FlowServiceCache


def test_initialize_is_async(transport):
    service = asyncio.run(FlowService.initialize("pt-BR", FlowConfig(), http_client=transport))
    assert service.language == "pt-BR"
    assert asyncio.run(service.evaluate("1,5 + 1")).value == 2.5


def test_language_defaults_to_config():
    service = FlowService.create(config=FlowConfig(language="pt-BR"))
    assert service.language == "pt-BR"


def test_unknown_language_falls_back_to_en_us():
    service = FlowService.create("fr-FR", FlowConfig())
    assert service.language == "en-US"


def test_documentation_lists_modules(service):
    names = [module.name for module in service.documentation()]
    assert names[0] == "HTTP"
    assert "Datetime" in names


def test_autocompleter_is_built_once(service):
    assert service.autocompleter() is service.autocompleter()


def test_concurrent_evaluations_do_not_share_state(service):
    async def scenario():
        return await asyncio.gather(
            service.evaluate("x = 1\nx + 1"),
            service.evaluate("x = 10\nx + 1"),
            service.evaluate("x"),
        )

    first, second, third = asyncio.run(scenario())
    assert (first.value, second.value) == (2, 11)
    assert third.error_type == "NameError"


def test_service_cache_builds_one_service_per_language(transport):
    cache = FlowServiceCache(FlowConfig(), http_client=transport)

    async def scenario():
        first = await cache.get("pt-BR")
        second = await cache.get("pt_br")
        english = await cache.get(None)
        return first, second, english

    first, second, english = asyncio.run(scenario())
    assert first is second
    assert english.language == "en-US"
    assert len(cache) == 2
    assert "pt-BR" in cache
    assert cache.get_sync("PT-br") is first


def test_sequencer_drops_stale_results(service):
    sequencer = EvaluationSequencer(service)
    first = sequencer.submit()
    second = sequencer.submit()
    late = sequencer.complete(first, FlowInteger(service.context, 1))
    assert late.stale
    assert sequencer.last_good is None
    current = sequencer.complete(second, FlowInteger(service.context, 2))
    assert not current.stale
    assert sequencer.last_good.value == 2


def test_sequencer_keeps_last_good_value_next_to_errors(service):
    sequencer = EvaluationSequencer(service)
    good = asyncio.run(sequencer.evaluate("1 + 1"))
    bad = asyncio.run(sequencer.evaluate("1 +"))
    assert not good.is_error
    assert bad.is_error
    assert isinstance(sequencer.error, FlowError)
    assert sequencer.last_good.value == 2
    asyncio.run(sequencer.evaluate("3"))
    assert sequencer.error is None
    assert sequencer.last_good.value == 3


def test_service_cache_works_across_event_loops(transport):
    cache = FlowServiceCache(FlowConfig(), http_client=transport)
    english = asyncio.run(cache.get("en-US"))

    async def contended():
        return await asyncio.gather(cache.get("pt-BR"), cache.get("pt-BR"), cache.get("en-US"))

    first, second, again = asyncio.run(contended())
    assert first is second
    assert again is english
