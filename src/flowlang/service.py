"""
FlowService: the single entry point embedding applications use.

A service is built once per language (``await FlowService.initialize("pt-BR")``)
and then evaluates any number of programs. The module registry is harvested
at initialization and shared read-only; every evaluation gets its own
interpreter, scope and AST.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from .config import FlowConfig, load_config
from .context import FlowContext
from .errors import FlowException, LexError, ParseError
from .parser import parse_source
from .registry import ModuleDescriptor, ModuleRegistry, build_registry
from .runtime.cache import ResponseCache
from .runtime.interpreter import Interpreter
from .runtime.objects import SYNTAX_ERROR, FlowError, FlowObject
from .runtime.transport import HTTPClient, http_request

if TYPE_CHECKING:  # pragma: no cover
    from .autocomplete import Autocompleter

log = logging.getLogger(__name__)


class FlowService:
    def __init__(
        self,
        context: FlowContext,
        registry: ModuleRegistry,
        config: Optional[FlowConfig] = None,
        *,
        http_client: Optional[HTTPClient] = None,
    ) -> None:
        self.context = context
        self.registry = registry
        self.config = config or FlowConfig(language=context.language)
        self.http_client = http_client or http_request
        self.response_cache: Optional[ResponseCache] = None
        if self.config.http_cache_enabled:
            self.response_cache = ResponseCache(ttl=self.config.http_cache_ttl)
        self._autocompleter: Optional["Autocompleter"] = None

    @property
    def language(self) -> str:
        return self.context.language

    @classmethod
    def create(
        cls,
        language: Optional[str] = None,
        config: Optional[FlowConfig] = None,
        *,
        modules: Optional[List[type]] = None,
        http_client: Optional[HTTPClient] = None,
    ) -> "FlowService":
        """Synchronous variant of :meth:`initialize`."""
        config = config or load_config()
        context = FlowContext.for_language(
            language or config.language,
            max_call_stack_size=config.max_call_stack_size,
            modules=modules,
        )
        registry = build_registry(context)
        log.info("Initialized Flow service for %s with %d modules", context.language, len(registry.modules()))
        return cls(context, registry, config, http_client=http_client)

    @classmethod
    async def initialize(
        cls,
        language: Optional[str] = None,
        config: Optional[FlowConfig] = None,
        *,
        modules: Optional[List[type]] = None,
        http_client: Optional[HTTPClient] = None,
    ) -> "FlowService":
        return await asyncio.to_thread(cls.create, language, config, modules=modules, http_client=http_client)

    def new_interpreter(self) -> Interpreter:
        return Interpreter(
            self.context,
            self.registry,
            http_client=self.http_client,
            http_timeout=self.config.http_timeout,
            response_cache=self.response_cache,
        )

    def evaluate_sync(self, code: str, representation: bool = False) -> Any:
        """
        Run ``code`` and return a FlowObject.

        Syntax errors and uncaught language errors come back as a
        :class:`FlowError`, never as exceptions.
        """
        try:
            program = parse_source(code, self.context)
        except (LexError, ParseError) as exc:
            log.debug("Syntax error in Flow program: %s", exc)
            result: FlowObject = FlowError(self.context, SYNTAX_ERROR, str(exc))
        else:
            try:
                result = self.new_interpreter().run(program)
            except FlowException as exc:
                log.debug("Flow program raised %s", exc.error_type)
                result = exc.error
        if representation:
            return result._string_()._representation_()
        return result

    async def evaluate(self, code: str, representation: bool = False) -> Any:
        return await asyncio.to_thread(self.evaluate_sync, code, representation)

    def documentation(self) -> List[ModuleDescriptor]:
        """Modules documented in the service language, in registration order."""
        return self.registry.documented()

    def autocompleter(self) -> "Autocompleter":
        if self._autocompleter is None:
            from .autocomplete import Autocompleter

            self._autocompleter = Autocompleter(self.registry, self.context)
        return self._autocompleter


class FlowServiceCache:
    """One initialized service per language, owned by whoever creates the cache."""

    def __init__(self, config: Optional[FlowConfig] = None, *, http_client: Optional[HTTPClient] = None) -> None:
        self.config = config
        self.http_client = http_client
        self._services: Dict[str, FlowService] = {}
        self._lock = threading.Lock()

    async def get(self, language: Optional[str] = None) -> FlowService:
        return await asyncio.to_thread(self.get_sync, language)

    def get_sync(self, language: Optional[str] = None) -> FlowService:
        key = self._key(language)
        with self._lock:
            service = self._services.get(key)
            if service is None:
                service = FlowService.create(key, self.config, http_client=self.http_client)
                self._services[key] = service
            return service

    def _key(self, language: Optional[str]) -> str:
        fallback = self.config.language if self.config else None
        return FlowContext.for_language(language or fallback, modules=()).language

    def __contains__(self, language: str) -> bool:
        return self._key(language) in self._services

    def __len__(self) -> int:
        return len(self._services)


@dataclass
class EvaluationOutcome:
    request_id: int
    result: Any = None
    stale: bool = False

    @property
    def is_error(self) -> bool:
        return isinstance(self.result, FlowError)


class EvaluationSequencer:
    """
    Orders evaluations submitted while the user keeps typing.

    Each submission gets an increasing request id; a result that arrives
    after a newer submission is marked stale and does not replace what is
    on screen. ``last_good`` keeps the latest non error value and ``error``
    the latest error, so a caller can show both.
    """

    def __init__(self, service: FlowService) -> None:
        self.service = service
        self.latest_id = 0
        self.last_good: Optional[FlowObject] = None
        self.error: Optional[FlowError] = None
        self._lock = threading.Lock()

    def submit(self) -> int:
        with self._lock:
            self.latest_id += 1
            return self.latest_id

    def complete(self, request_id: int, result: FlowObject) -> EvaluationOutcome:
        with self._lock:
            if request_id != self.latest_id:
                log.debug("Dropping stale evaluation %d (latest is %d)", request_id, self.latest_id)
                return EvaluationOutcome(request_id, result, stale=True)
            if isinstance(result, FlowError):
                self.error = result
            else:
                self.last_good = result
                self.error = None
            return EvaluationOutcome(request_id, result)

    async def evaluate(self, code: str) -> EvaluationOutcome:
        request_id = self.submit()
        result = await self.service.evaluate(code)
        return self.complete(request_id, result)
