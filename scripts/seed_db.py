from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.employee_directory.employee_directory.container import build_container


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings)

    profile = container.demo_seeder.ensure_demo_account()
    if profile is None:
        raise SystemExit(f"Could not set up demo account {container.demo_email}")

    employees = container.employees_repo.list_all()
    print(f"OK: Demo account {profile.email} ready ({len(employees)} employees, store={container.record_store_backend})")


if __name__ == "__main__":
    main()
