import sys
from pathlib import Path
from typing import Callable, Dict

# Add project root to Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from notion_scheduler.core.config_manager import Config, ENV_FILE  # noqa: E402
from notion_scheduler.core.exceptions import SchedulerError  # noqa: E402
from notion_scheduler.core.orchestrator import WeekGeneratorFactory  # noqa: E402

PROMPTS = [
    ("NOTION_API_KEY", "Notion integration token (https://www.notion.so/my-integrations)", None),
    ("TEMPLATE_DB_ID", "Template database ID", None),
    ("CALENDAR_DB_ID", "Calendar database ID", None),
    ("TIMEZONE", "Timezone (IANA name)", "UTC"),
    ("LOG_LEVEL", "Log level", "INFO"),
]


def read_env_file(path: Path) -> Dict[str, str]:
    """Parse KEY=VALUE lines, ignoring comments and blanks."""
    values: Dict[str, str] = {}
    if not path.exists():
        return values

    for line in path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, value = stripped.split("=", 1)
        values[key.strip()] = value.strip().strip("'\"")
    return values


def write_env_file(values: Dict[str, str], path: Path) -> None:
    """
    Write ``values`` into the .env file.

    Existing keys are replaced in place; unrelated lines and comments are kept.
    """
    lines = path.read_text(encoding="utf-8").splitlines() if path.exists() else []
    remaining = dict(values)

    updated = []
    for line in lines:
        key = line.split("=", 1)[0].strip() if "=" in line and not line.lstrip().startswith("#") else None
        if key in remaining:
            updated.append(f"{key}={remaining.pop(key)}")
        else:
            updated.append(line)

    updated.extend(f"{key}={value}" for key, value in remaining.items())
    path.write_text("\n".join(updated) + "\n", encoding="utf-8")


def prompt_settings(existing: Dict[str, str], ask: Callable[[str], str] = input) -> Dict[str, str]:
    """Ask for every setting, offering the current value (or default) on empty input."""
    values = {}
    for key, label, default in PROMPTS:
        current = existing.get(key) or default
        shown = f" [{current}]" if current and key != "NOTION_API_KEY" else ""
        answer = ask(f"{label}{shown}: ").strip()
        if answer:
            values[key] = answer
        elif current:
            values[key] = current
    return values


def main() -> int:
    print("🗓️  Setting up the Notion Week Scheduler...")

    existing = read_env_file(ENV_FILE)
    values = prompt_settings(existing)
    write_env_file(values, ENV_FILE)
    print(f"✅ Settings saved to {ENV_FILE}")

    try:
        config = Config.from_env({**existing, **values})
        WeekGeneratorFactory.create(config).verify_connection()
    except SchedulerError as e:
        print(f"❌ {e}")
        return 1

    print("🎉 Connection verified! Run 'python plan.py' to generate next week.")
    return 0


if __name__ == '__main__':
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n❌ Setup cancelled.")
        sys.exit(1)
