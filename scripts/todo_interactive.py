#!/usr/bin/env python3
# =============================================================================
# scripts/todo_interactive.py - Interactive Todo List
# =============================================================================
# A terminal front end for the Todo API, built on client.TodoController.
# Shows the list newest first, the completed count and a progress bar.
#
# Usage:
#   python scripts/todo_interactive.py                    # Uses TODO_API_URL or localhost:5000
#   python scripts/todo_interactive.py http://host:5000
#
# Commands:
#   <text>          - Add a task
#   /toggle <n>     - Toggle task number n (as shown in the list)
#   /delete <n>     - Delete task number n
#   /refresh        - Fetch the list again
#   /quit or /exit  - Exit
#   /help           - Show help
# =============================================================================

import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

from client import DEFAULT_API_URL, TodoApiClient, TodoController, TodoListState

PROGRESS_WIDTH = 30


def print_state(state: TodoListState):
    """Render the list the way the web client shows it."""
    print("\n" + "=" * 50)
    print("  Todo App")

    if state.error:
        print(f"  ! {state.error}")

    if state.total_count:
        print(f"  {state.completed_count} of {state.total_count} tasks completed")
    print("-" * 50)

    if not state.tasks:
        print("\n  No tasks yet. Add one below!\n")
    else:
        for number, task in enumerate(state.tasks, start=1):
            mark = "x" if task.completed else " "
            print(f"  {number:>3}. [{mark}] {task.text}")

    if state.total_count:
        filled = round(state.progress_percent / 100 * PROGRESS_WIDTH)
        bar = "#" * filled + "." * (PROGRESS_WIDTH - filled)
        print(f"\n  Progress [{bar}] {state.progress_percent}%")

    print("=" * 50 + "\n")


def print_help():
    """Print available commands."""
    print("\n" + "-" * 40)
    print("COMMANDS:")
    print("  <text>        - Add a new task")
    print("  /toggle <n>   - Mark task n done / not done")
    print("  /delete <n>   - Delete task n")
    print("  /refresh      - Reload tasks from the server")
    print("  /help         - Show this help")
    print("  /quit         - Exit")
    print("-" * 40 + "\n")


def resolve_task_id(state: TodoListState, argument: str) -> int | None:
    """Translate a list number typed by the user into a todo id."""
    try:
        number = int(argument)
    except ValueError:
        return None
    if 1 <= number <= len(state.tasks):
        return state.tasks[number - 1].id
    return None


def main():
    """Main input loop."""
    api_url = sys.argv[1] if len(sys.argv) > 1 else os.getenv("TODO_API_URL", DEFAULT_API_URL)

    with TodoApiClient(api_url) as api:
        controller = TodoController(api)

        print(f"\n  Loading tasks from {api_url}...")
        print_state(controller.load())

        while True:
            try:
                user_input = input("> ").strip()
            except (KeyboardInterrupt, EOFError):
                print("\n\nGoodbye!\n")
                break

            if not user_input:
                continue

            command, _, argument = user_input.partition(" ")
            command = command.lower()

            if command in ["/quit", "/exit", "/q"]:
                print("\nGoodbye!\n")
                break

            if command == "/help":
                print_help()
                continue

            if command == "/refresh":
                print_state(controller.load())
                continue

            if command in ["/toggle", "/delete"]:
                todo_id = resolve_task_id(controller.state, argument.strip())
                if todo_id is None:
                    print(f"\n  Unknown task number: {argument or '(none)'}\n")
                    continue
                if command == "/toggle":
                    print_state(controller.toggle(todo_id))
                else:
                    print_state(controller.delete(todo_id))
                continue

            if user_input.startswith("/"):
                print(f"\n  Unknown command: {command}. Type /help for commands.\n")
                continue

            controller.set_draft(user_input)
            print_state(controller.add())


if __name__ == "__main__":
    main()
