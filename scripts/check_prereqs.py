#!/usr/bin/env python3
"""
Prerequisite checker for battleships.

Run from repo root (after activating your venv):

    python3 scripts/check_prereqs.py
"""

import sys
import traceback
from pathlib import Path


def add_src_to_syspath() -> None:
    """Ensure `src/` is on sys.path so `import battleships` works."""
    repo_root = Path(__file__).resolve().parents[1]
    src = repo_root / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))


def header(title: str) -> None:
    print("\n" + "=" * 72)
    print(title)
    print("=" * 72)


def check_python_version() -> bool:
    header("1) Python version")
    v = sys.version_info
    print(f"Detected Python: {v.major}.{v.minor}.{v.micro}")
    ok = (v.major == 3 and v.minor >= 10) or (v.major > 3)
    if ok:
        print("OK: Python 3.10 or newer is available.")
    else:
        print("FAIL: Python 3.10+ required for this project.")
    return ok


def check_core_imports() -> bool:
    header("2) Core library imports (pydantic, opentelemetry)")
    libs = [
        "pydantic",
        "opentelemetry.sdk",
        "opentelemetry.exporter.otlp.proto.grpc",
    ]
    all_ok = True
    for name in libs:
        try:
            __import__(name)
            print(f"OK: imported {name}")
        except Exception as exc:  # noqa: BLE001
            all_ok = False
            print(f"FAIL: could not import {name}: {exc}")
            traceback.print_exc(limit=1)
    return all_ok


def check_battleships_imports() -> bool:
    header("3) Battleships engine / telemetry imports")
    add_src_to_syspath()
    ok = True
    try:
        from battleships.engine.instrumented_manager import InstrumentedGameManager  # noqa: F401
        from battleships.engine.manager import GameManager  # noqa: F401
        from battleships.telemetry import TelemetryConfig  # noqa: F401

        print("OK: imported GameManager, InstrumentedGameManager, TelemetryConfig")
    except Exception as exc:  # noqa: BLE001
        ok = False
        print(f"FAIL: could not import battleships modules: {exc}")
        traceback.print_exc(limit=1)
    return ok


def check_engine_smoke_test() -> bool:
    header("4) Engine smoke test (create game, place ships, sink the fleet)")
    add_src_to_syspath()
    try:
        from battleships.engine.manager import GameManager
        from battleships.engine.ship import ShipOrientation

        manager = GameManager()
        game = manager.create_game("Player One", "Player Two")
        board = game.player_one.board
        if not manager.add_ship(board, 3, 6, ShipOrientation.HORIZONTAL, 3):
            print("FAIL: valid ship placement was rejected")
            return False
        if manager.add_ship(board, 9, 2, ShipOrientation.HORIZONTAL, 2):
            print("FAIL: out-of-bounds ship placement was accepted")
            return False
        print(f"OK: placed {len(board.ships)} ship(s) on a {board.width}x{board.height} board.")

        result = None
        for x_index, y_index in board.ships[0].coordinates():
            result = manager.attack(board, x_index, y_index)
        if result is None or not result.is_game_over:
            print(f"FAIL: fleet should be sunk after attacking every segment, got {result}")
            return False
        print(f"OK: final attack reported {result}")
        return True
    except Exception as exc:  # noqa: BLE001
        print(f"FAIL: engine smoke test failed: {exc}")
        traceback.print_exc(limit=1)
        return False


def main() -> None:
    checks = [
        ("Python version", check_python_version),
        ("Core imports", check_core_imports),
        ("Battleships imports", check_battleships_imports),
        ("Engine smoke test", check_engine_smoke_test),
    ]

    overall_ok = True
    results: list[tuple[str, bool]] = []

    for name, fn in checks:
        ok = fn()
        results.append((name, ok))
        overall_ok = overall_ok and ok

    header("Summary")
    for name, ok in results:
        status = "OK  " if ok else "FAIL"
        print(f"{status} - {name}")

    print("\n" + "=" * 72)
    if overall_ok:
        print("ALL CHECKS PASSED: the engine is ready to use.")
        print("Next step example:")
        print("    python3 -m pytest")
    else:
        print("Some checks FAILED. Review the messages above and fix them before continuing.")
    print("=" * 72)


if __name__ == "__main__":
    main()
