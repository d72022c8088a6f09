"""FLAGDASH FILE PURPOSE
Purpose: regression runner (panel selftests + security checks) used by /admin/quality and CLI.
Hot path: no.
Feature flags: none (endpoint gating happens in panel module).
Failure mode: report per-panel failures; CLI can exit non-zero.
  Security check failures are reported but do not fail the run.
"""

from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any, Callable

from core.registry import enabled_panels

REPORT_PATH = Path("ops/QUALITY_REPORTS/latest_regression.json")


def _run_check(check: Callable[[], Any]) -> tuple[bool, str | None]:
    try:
        out = check()
    except Exception as e:
        return False, f"{type(e).__name__}: {e}"
    if isinstance(out, dict):
        return bool(out.get("ok", True)), out.get("message")
    return bool(getattr(out, "ok", True)), getattr(out, "message", None)


def run_regression() -> dict[str, Any]:
    results: list[dict[str, Any]] = []
    ok = True
    panels = enabled_panels()

    for key, spec in panels.items():
        t0 = time.perf_counter()
        passed, msg = _run_check(spec.selftests)
        dt_ms = (time.perf_counter() - t0) * 1000.0
        security_ok, security_msg = _run_check(spec.security_checks)

        ok = ok and passed
        results.append(
            {
                "panel": key,
                "ok": passed,
                "ms": round(dt_ms, 2),
                "message": msg,
                "security_ok": security_ok,
                "security_message": security_msg,
            }
        )

    report = {
        "status": "ok" if ok else "fail",
        "ts": int(time.time()),
        "enabled_panels": sorted(panels.keys()),
        "results": results,
        "report_path": str(REPORT_PATH),
    }

    REPORT_PATH.parent.mkdir(parents=True, exist_ok=True)
    REPORT_PATH.write_text(json.dumps(report, indent=2), encoding="utf-8")
    return report
