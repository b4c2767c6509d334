"""Terminal chat client for the WCG AI assistant.

Usage:
    wcg-ai            # storage dir from WCG_AI_STORAGE_DIR (default: memory)
    wcg-ai <dir>      # explicit storage dir

Commands: !do N, !clear, !help, !quit
"""

import asyncio
import sys
from typing import Callable, List, Optional

from wcg_ai.app import AssistantApp
from wcg_ai.config import AssistantConfig
from wcg_ai.domain.fallback import describe_rules
from wcg_ai.domain.handlers import UnknownActionError
from wcg_ai.domain.models import ConversationMessage

COMMANDS = ("!do", "!clear", "!help", "!quit")

HELP_TEXT = """Commands:
  !do N    run action N from the last reply
  !clear   clear conversation history
  !help    show this help
  !quit    exit"""


def format_reply(message: ConversationMessage) -> str:
    lines = [message.content]
    if message.actions:
        lines.append("")
        for idx, action in enumerate(message.actions, start=1):
            lines.append(f"  [{idx}] {action.label}")
    return "\n".join(lines)


class ChatCLI:
    def __init__(self, app: AssistantApp, output: Callable[[str], None] = print):
        self.app = app
        self._out = output
        self._last: Optional[ConversationMessage] = app.history.last_assistant()

    def is_command(self, line: str) -> Optional[str]:
        stripped = line.strip()
        if not stripped:
            return None
        cmd = stripped.split()[0].lower()
        return cmd if cmd in COMMANDS else None

    async def send(self, text: str):
        self._last = await self.app.send(text)
        self._out(format_reply(self._last))

    async def run_action(self, args: List[str]):
        actions = self._last.actions if self._last else ()
        if not args or not args[0].isdigit():
            self._out("Usage: !do N")
            return
        idx = int(args[0])
        if not 1 <= idx <= len(actions):
            self._out(f"No action {idx} (last reply has {len(actions)})")
            return
        try:
            outcome = self.app.run_action(actions[idx - 1])
        except UnknownActionError as e:
            self._out(str(e))
            return
        if outcome.toast:
            self._out(f"* {outcome.toast}")
        # The follow-up goes back through the assistant like a typed message
        await self.send(outcome.follow_up)

    async def handle_line(self, line: str) -> bool:
        """Process one input line. Returns False when the session should end."""
        cmd = self.is_command(line)
        if cmd is None:
            if line.strip():
                await self.send(line.strip())
            return True
        args = line.strip().split()[1:]
        if cmd == "!quit":
            return False
        if cmd == "!help":
            self._out(HELP_TEXT)
        elif cmd == "!clear":
            self.app.clear_history()
            self._last = None
            self._out("History cleared.")
        elif cmd == "!do":
            await self.run_action(args)
        return True


async def run(app: AssistantApp, read: Callable[[str], str] = input):
    cli = ChatCLI(app)
    print(f"WCG AI ({app.mode} mode). Type !help for commands.")
    if app.mode == "local":
        print("Offline topics: " + ", ".join(describe_rules()))
    while True:
        try:
            line = await asyncio.to_thread(read, "> ")
        except (EOFError, KeyboardInterrupt):
            break
        if not await cli.handle_line(line):
            break


def main(argv: Optional[List[str]] = None):
    argv = sys.argv[1:] if argv is None else argv
    config = AssistantConfig.from_env()
    if argv:
        config.storage_dir = argv[0]
    asyncio.run(run(AssistantApp(config)))


if __name__ == "__main__":
    main()
