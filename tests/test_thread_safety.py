"""Thread safety tests for shared registries and engines.

A registry and engine are immutable and may be shared; each thread owns its
own Scanner. These tests use real threading to catch interference.
"""

import threading
from concurrent.futures import ThreadPoolExecutor, as_completed

from regulex import MatchEngine, PatternRegistryBuilder, ScanConfig, scan_config_context


def make_engine() -> MatchEngine:
    builder = PatternRegistryBuilder()
    builder.define("WHITESPACE", r"\s+", skip=True)
    builder.define("ID", r"[a-z]+")
    builder.define("NUMBER", r"[0-9]+")
    builder.define("OPT", r"-?")
    return MatchEngine(builder.build())


def scan_all(engine: MatchEngine, source: str) -> list[tuple[str, str, int]]:
    return [(t.kind, t.text, t.start) for t in engine.scanner(source)]


class TestSharedEngine:
    """One engine, many scanners."""

    def test_concurrent_scanners_match_sequential_results(self) -> None:
        engine = MatchEngine(make_engine().registry, ScanConfig(ignore_empty_matches=True))
        sources = [f"word{i} {i} # tail {i * 7}" * 20 for i in range(40)]
        expected = {s: scan_all(engine, s) for s in sources}

        with ThreadPoolExecutor(max_workers=8) as executor:
            futures = {executor.submit(scan_all, engine, s): s for s in sources}
            for future in as_completed(futures):
                assert future.result() == expected[futures[future]]

    def test_context_config_is_per_thread(self) -> None:
        """Config set in one thread does not leak into another."""
        engine = make_engine()
        barrier = threading.Barrier(2)
        results: dict[str, object] = {}
        errors: list[str] = []

        def lenient() -> None:
            try:
                with scan_config_context(ScanConfig(ignore_empty_matches=True)):
                    barrier.wait(timeout=5)
                    results["lenient"] = scan_all(engine, "ab #")
            except Exception as e:
                errors.append(f"lenient: {e}")

        def strict() -> None:
            try:
                barrier.wait(timeout=5)
                scan_all(engine, "ab #")
            except Exception as e:
                results["strict"] = type(e).__name__

        threads = [threading.Thread(target=lenient), threading.Thread(target=strict)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert not errors
        assert results["lenient"] == [("ID", "ab", 0), ("UNEXPECTED", "#", 3), ("EOF", "", 4)]
        assert results["strict"] == "EmptyMatchError"
