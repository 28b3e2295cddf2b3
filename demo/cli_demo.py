#!/usr/bin/env python3
"""
Interactive CLI demo for the farming assistant.

Chat with the assistant from a terminal. Photos can be scanned with
"/soil <path>" or "/pest <path>".
"""
import logging
import sys

from agri_assist import AgriAssistApp, load_config_from_env
from agri_assist.exceptions import AgriAssistError
from agri_assist.security import FileValidationError


def print_banner():
    """Print welcome banner."""
    print("\n" + "=" * 60)
    print("  AgriAssist - Farming Assistant CLI Demo")
    print("=" * 60)
    print("\nAsk me about:")
    print("  • Soil testing")
    print("  • Government aid, schemes and loans")
    print("  • Pest identification")
    print("\nCommands: /soil <image>, /pest <image>, /state, /reset")
    print("Type 'quit' or 'exit' to end the session.")
    print("-" * 60 + "\n")


def print_response(response):
    """Print the bot messages and any panels that opened."""
    for message in response.messages:
        if message.role.value == "bot":
            print(f"\n🌾 Bot: {message.content}")
            if message.type.value != "text":
                print(f"   [{message.type.value} shown]")

    opened = [name for name, is_open in response.panels.items()
              if is_open and name not in ("suggestions", "welcome_screen")]
    if opened:
        print(f"🪟 Open panels: {', '.join(opened)}")

    if response.show_suggestions:
        print("💡 Try asking:")
        for question in response.suggested_questions:
            print(f"   - {question}")

    print("-" * 60)


def handle_command(agri_app, query):
    """Handle slash commands. Returns True if the input was a command."""
    command, _, argument = query.partition(" ")
    argument = argument.strip()

    if command == "/soil" and argument:
        print_response(agri_app.scan_soil(argument))
    elif command == "/pest" and argument:
        print_response(agri_app.detect_pest(argument))
    elif command == "/state":
        state = agri_app.get_state()
        print(f"\n📋 Context: {state.context}")
        print(f"📋 Messages: {len(state.messages)}")
        print("-" * 60)
    elif command == "/reset":
        agri_app.reset()
        print("\n🧹 Conversation cleared.")
        print("-" * 60)
    else:
        return False
    return True


def main():
    """Main CLI loop."""
    logging.basicConfig(
        level=logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
    print_banner()

    try:
        agri_app = AgriAssistApp(load_config_from_env())
        agri_app.initialize()
        agri_app.start_chat()
    except AgriAssistError as e:
        print(f"\n❌ Failed to initialize: {e}")
        print("Please check your environment variables and configuration.")
        return 1

    while True:
        try:
            query = input("You: ").strip()

            if not query:
                continue

            if query.lower() in ['quit', 'exit', 'q']:
                print("\n👋 Happy farming! Goodbye!\n")
                break

            try:
                if not (query.startswith("/") and handle_command(agri_app, query)):
                    print_response(agri_app.chat(query))
            except (AgriAssistError, FileValidationError) as e:
                print(f"\n❌ Error: {e}")
                print("-" * 60)

        except KeyboardInterrupt:
            print("\n\n👋 Interrupted. Goodbye!\n")
            break
        except EOFError:
            print("\n\n👋 Goodbye!\n")
            break

    return 0


if __name__ == "__main__":
    sys.exit(main())
