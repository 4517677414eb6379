from __future__ import annotations

from zap_users.app.domain.models.user import User

COLUMNS = [("id", "ID"), ("name", "Name"), ("enabled", "Enabled")]


def format_users_table(title: str, users: list[User]) -> list[str]:
    lines = [title]
    if not users:
        lines.append("(no users)")
        return lines

    rows = [{"id": str(user.id), "name": user.name, "enabled": "yes" if user.enabled else "no"} for user in users]
    widths = [max(len(header), max(len(row[key]) for row in rows)) for key, header in COLUMNS]
    lines.append(" | ".join(header.ljust(widths[idx]) for idx, (_, header) in enumerate(COLUMNS)))
    lines.append("-+-".join("-" * width for width in widths))
    for row in rows:
        lines.append(" | ".join(row[key].ljust(widths[idx]) for idx, (key, _) in enumerate(COLUMNS)))
    return lines


def print_users_table(title: str, users: list[User]) -> None:
    print("\n".join(format_users_table(title, users)))
