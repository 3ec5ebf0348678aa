import asyncio
import enum
import logging

from .exceptions import CountryLookupError

logger = logging.getLogger(__name__)


class State(str, enum.Enum):
    IDLE = "idle"
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class FetchController:
    """
    Re-runs the lookup every time the watched input changes.

    Each lookup is tagged with the generation it was started in. When it
    resolves, its outcome is kept only if no newer lookup has been started
    since; older requests are left to finish and their results dropped.
    """

    def __init__(self, lookup):
        self._lookup = lookup
        self._tasks = set()
        self.generation = 0
        self.state = State.IDLE
        # CountryRecord, CountryLookupError or None
        self.result = None

    def watch(self, source):
        unsubscribe = source.subscribe(self.on_input)
        self.on_input(source.value)
        return unsubscribe

    def on_input(self, value):
        self.generation += 1
        if not value:
            self.state = State.IDLE
            self.result = None
            return

        self.state = State.PENDING
        task = asyncio.create_task(self._run(self.generation, value))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    @property
    def pending(self) -> bool:
        return self.state is State.PENDING

    async def _run(self, generation, value):
        try:
            outcome = await self._lookup(value)
            state = State.SUCCEEDED
        except CountryLookupError as exc:
            logger.warning("Lookup for %r failed (%s): %s", value, exc.kind, exc)
            outcome = exc
            state = State.FAILED

        if generation != self.generation:
            logger.debug("Discarding stale result for %r (generation %d < %d)",
                         value, generation, self.generation)
            return

        self.result = outcome
        self.state = state

    async def settle(self):
        """Wait for every in-flight lookup and return the latest outcome."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))
        return self.result
