"""Command orchestration.

Wires authenticator, catalog, resolver and tracker for one invocation. The
CLI only builds a `Command`, hands it to `CommandRunner.run` and renders
the `CommandResult`; no printing happens here.

Every step awaits the previous one: sign-in, then the catalog when the
command needs it, then the tracking call. Any error aborts the rest.
"""

from __future__ import annotations

import logging
from typing import Callable, assert_never

import httpx

from adapters.timeular_api import ActivityCatalog, SessionAuthenticator, TrackingController
from core.domain.commands import Command, CommandResult, ListCommand, StartCommand, StopCommand
from core.domain.models import CommandTimestamp, Credentials
from core.interfaces.timeular import ActivitySource, Authenticator, Tracker
from core.services.resolver import ActivityResolver

logger = logging.getLogger(__name__)

Clock = Callable[[], CommandTimestamp]


class CommandRunner:
    def __init__(
        self,
        credentials: Credentials,
        *,
        authenticator: Authenticator,
        catalog: ActivitySource,
        tracker: Tracker,
        resolver: ActivityResolver | None = None,
        clock: Clock = CommandTimestamp.capture,
    ) -> None:
        self._credentials = credentials
        self._authenticator = authenticator
        self._catalog = catalog
        self._tracker = tracker
        self._resolver = resolver or ActivityResolver()
        self._clock = clock

    @classmethod
    def from_client(
        cls,
        client: httpx.AsyncClient,
        credentials: Credentials,
        *,
        strict_status: bool = False,
        clock: Clock = CommandTimestamp.capture,
    ) -> "CommandRunner":
        return cls(
            credentials,
            authenticator=SessionAuthenticator(client),
            catalog=ActivityCatalog(client, strict_status=strict_status),
            tracker=TrackingController(client, strict_status=strict_status),
            clock=clock,
        )

    async def run(self, command: Command) -> CommandResult:
        timestamp = self._clock()
        logger.debug("running %s at %s", type(command).__name__, timestamp.value)

        if isinstance(command, ListCommand):
            token = await self._authenticator.authenticate(self._credentials)
            catalog = await self._catalog.fetch(token)
            return CommandResult(command=command, timestamp=timestamp, catalog=catalog)

        if isinstance(command, StartCommand):
            # Fail on a bad pattern before any request goes out.
            regex = self._resolver.compile(command.pattern)
            token = await self._authenticator.authenticate(self._credentials)
            catalog = await self._catalog.fetch(token)
            activity = self._resolver.resolve(catalog, regex)
            logger.info("starting %r (id=%s)", activity.name, activity.id)
            await self._tracker.start(token, activity.id, command.note, timestamp)
            return CommandResult(
                command=command, timestamp=timestamp, catalog=catalog, activity=activity
            )

        if isinstance(command, StopCommand):
            token = await self._authenticator.authenticate(self._credentials)
            await self._tracker.stop(token, timestamp)
            return CommandResult(command=command, timestamp=timestamp)

        assert_never(command)
