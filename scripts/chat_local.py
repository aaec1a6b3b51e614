#!/usr/bin/env python3
"""
Interactive local chat harness (no HTTP, no WhatsApp).

Usage:
  python3 scripts/chat_local.py [path/to/clinic.json]

What it does:
- Keeps a stable user id for the session
- Runs your typed messages through the same ConversationEngine the bot uses
- Prints the state transition and every reply the bot would send
"""
from __future__ import annotations

import os
import sys
import time
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from clinic_bot.application.exceptions import ConfigError
from clinic_bot.application.use_cases.conversation_engine import ConversationEngine
from clinic_bot.core.config import settings
from clinic_bot.infrastructure.clinic.clinic_config_store import load_clinic_directory
from clinic_bot.infrastructure.store.memory_store import MemorySessionStore


def _print_header(user_id: str, clinic_name: str) -> None:
    print("\nLocal Chat Harness")
    print("-" * 60)
    print(f"clinic: {clinic_name}")
    print(f"user_id: {user_id}")
    print("Type your message and press Enter.")
    print("Commands: /new (new user), /state, /quit, /help")
    print("-" * 60)


def main() -> None:
    config_path = sys.argv[1] if len(sys.argv) > 1 else settings.CLINIC_CONFIG_PATH
    try:
        directory = load_clinic_directory(config_path)
    except ConfigError as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    engine = ConversationEngine(directory=directory)
    store = MemorySessionStore()
    user_id = os.getenv("CHAT_USER_ID", "5491100000000")
    _print_header(user_id, directory.clinic_name)

    while True:
        try:
            user_text = input("\n> ")
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        cmd = user_text.strip().lower()
        if cmd in ("/quit", "/exit"):
            print("Bye!")
            return
        if cmd == "/help":
            print("Commands:")
            print("  /new   -> start over as a new user")
            print("  /state -> show the stored session")
            print("  /quit  -> exit")
            continue
        if cmd == "/new":
            user_id = f"549110{int(time.time())}"
            print(f"New user_id: {user_id}")
            continue
        if cmd == "/state":
            print(store.get_or_create(user_id))
            continue

        session = store.get_or_create(user_id)
        result = engine.handle(session, user_text)
        store.save(result.session)

        print("\n--- Transition ---")
        print(f"{session.state.value} -> {result.session.state.value}")
        print("\n--- Replies ---")
        if not result.replies:
            print("(no reply)")
        for reply in result.replies:
            print(reply)
            print()
        print("-" * 60)


if __name__ == "__main__":
    main()
