#!/usr/bin/env python3
"""
Pre-push / production readiness checks.
Run from backend dir with project venv active: python scripts/pre_push_checks.py
"""
import sys
from pathlib import Path

BACKEND = Path(__file__).resolve().parent.parent
if str(BACKEND) not in sys.path:
    sys.path.insert(0, str(BACKEND))


def check_imports():
    from app.main import app  # noqa: F401
    from app.services import biography_sessions, navigator, narrative  # noqa: F401
    from app.services.question_bank import LEVEL_ORDER
    assert LEVEL_ORDER == ("ultra_brief", "brief", "moderate", "detailed", "comprehensive")
    return "imports"


def check_level_monotonic():
    from app.services.plan_builder import count_questions
    from app.services.question_bank import LEVEL_ORDER
    counts = [count_questions(level) for level in LEVEL_ORDER]
    assert counts == sorted(counts), counts
    return "level_monotonic"


def check_lead_ins_compile():
    from app.services.narrative import LEAD_INS, question_lead_in
    assert LEAD_INS
    assert question_lead_in("What is your earliest memory?") == "Looking back to the earliest memories,"
    return "lead_ins"


def check_init_db():
    from app.database import init_sqlite_db
    init_sqlite_db()
    return "init_sqlite_db"


def main():
    checks = [check_imports, check_level_monotonic, check_lead_ins_compile, check_init_db]
    for fn in checks:
        try:
            name = fn()
            print(f"OK {name}")
        except Exception as e:
            print(f"FAIL {fn.__name__}: {e}")
            return 1
    print("All pre-push checks passed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
