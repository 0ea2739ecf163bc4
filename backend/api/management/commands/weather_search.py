"""Management command to search weather by place name from the terminal."""
from __future__ import annotations

import json
import sys
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from backend.api.views import get_weather_lookup
from weather_search.render import record_to_dict, render_record
from weather_search.state import Failed, SearchSession, SearchState, Success


class Command(BaseCommand):
    help = "Look up current weather for a place name"
    stealth_options = ("stdin",)

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("query", nargs="*", help="Place name, e.g. Tokyo")
        parser.add_argument("--json", action="store_true", help="Print the raw record as JSON")
        parser.add_argument(
            "--interactive",
            action="store_true",
            help="Read one query per line until EOF or 'quit'",
        )

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        session = SearchSession(get_weather_lookup())
        as_json = options["json"]

        if options["interactive"]:
            stdin = options.get("stdin") or sys.stdin
            for line in stdin:
                query = line.strip()
                if query.lower() in {"quit", "exit"}:
                    break
                state = session.run(query)
                if isinstance(state, Failed):
                    self.stderr.write(state.message)
                    continue
                self._write(state, as_json)
            return

        state = session.run(" ".join(options["query"]))
        if isinstance(state, Failed):
            raise CommandError(state.message)
        self._write(state, as_json)

    def _write(self, state: SearchState, as_json: bool) -> None:
        if not isinstance(state, Success):
            return
        if as_json:
            payload = {
                "record": record_to_dict(state.record),
                "view": render_record(state.record).as_dict(),
            }
            self.stdout.write(json.dumps(payload, ensure_ascii=False))
            return
        for line in render_record(state.record).lines():
            self.stdout.write(line)
