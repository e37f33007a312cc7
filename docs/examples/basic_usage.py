"""Instrument a toy request handler and print one scrape.

Run with::

    METRICS_LOG_LEVEL=debug python docs/examples/basic_usage.py
"""
from __future__ import annotations

import random

from metrics_core.config import EnvSettingsLoader, RegistrySettings
from metrics_core.metrics import Counter, Gauge, Histogram, Info, Summary
from metrics_core.observability.logging import JsonLoggerFactory
from metrics_core.registry import Registry, build_counter


def main() -> None:
    settings = EnvSettingsLoader().load(RegistrySettings)
    JsonLoggerFactory.configure_from_settings(settings)
    registry = Registry.from_settings(settings)

    requests = build_counter().name("http_requests_total").help("Handled requests.").register(registry)
    registry.add_family(Gauge, "http_in_flight", "Requests being served.")
    registry.add_family(Histogram, "http_request_duration_seconds", "Request latency.")
    registry.add_family(Summary, "http_response_bytes", "Response size.")
    registry.add_family(Info, "build_info", "Build metadata.", {"version": "0.1.0"}).get_or_add()

    in_flight = registry.get_or_add_metric(Gauge, "http_in_flight")
    for _ in range(20):
        route = random.choice(["/", "/orders", "/health"])
        in_flight.increment()
        requests.get_or_add({"route": route}).increment()
        registry.observe(Histogram, "http_request_duration_seconds", {"route": route}, random.expovariate(20))
        registry.observe(Summary, "http_response_bytes", None, random.randint(100, 5000))
        in_flight.decrement()

    for family in registry.collect():
        print(f"# {family.type.value} {family.name}: {family.help}")
        for sample in family.metrics:
            print("  ", sample.label_pairs, sample)


if __name__ == "__main__":
    main()
