"""
Console Tester for the Odia IME
===============================

Interactive tool for manually testing transliteration and suggestions.

Usage:
    python console_ime.py

Commands:
    - Type any romanized text to see the Odia output, word by word
    - Type 'debug <word>' to see which rule matched each chunk
    - Type 'suggest <word>' to see the ranked suggestion list
    - Type 'num <n>' to convert a number to Odia numerals
    - Type 'json <text>' to see the /transliterate API payload
    - Type 'q' or 'quit' to exit
"""

import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from config import get_settings
from tools import (
    contains_odia,
    from_odia_numeral,
    get_typing_hint,
    install_dictionary,
    rank_suggestions,
    to_odia_numeral,
    transliterate,
    WordDictionary,
)
from tools.transliteration_map import explain


def print_header():
    """Print welcome header."""
    print("\n" + "=" * 60)
    print("  ODIA IME CONSOLE TESTER")
    print("  Phonetic Latin -> Odia Transliteration")
    print("=" * 60)
    print("\nCommands:")
    print("  <text>          - Transliterate")
    print("  debug <word>    - Show matched chunks")
    print("  suggest <word>  - Show suggestion list")
    print("  num <n>         - Odia numerals (either direction)")
    print("  json <text>     - Show JSON output (for frontend)")
    print("  q / quit        - Exit")
    print("=" * 60 + "\n")


def debug_word(word: str):
    """Show each match the engine makes for a word."""
    print(f"\n--- Debug: '{word}' ---")
    position = 0
    for step in explain(word):
        chunk = word[position:position + step.consumed]
        print(f"   {position:>3}  {chunk!r:<10} {step.family:<12} -> {step.output}")
        position += step.consumed
    print(f"\n📝 Output: {transliterate(word)}")


def show_suggestions(word: str):
    """Show ranked suggestions with their quick-pick numbers."""
    print(f"\n--- Suggestions: '{word}' ---")
    suggestions = rank_suggestions(word)
    if not suggestions:
        print("   (none)")
    for s in suggestions:
        print(f"   {s.key + 1}. {s.text}")
    hint = get_typing_hint(word)
    if hint:
        print(f"\n💡 {hint}")


def show_numeral(text: str):
    if contains_odia(text):
        value = from_odia_numeral(text)
        if value is None:
            print(f"   Not an Odia numeral: {text}")
        else:
            print(f"   {text} -> {value}")
    elif text.isdigit():
        print(f"   {text} -> {to_odia_numeral(int(text))}")
    else:
        print("Usage: num <digits>")


def show_json_output(text: str):
    output = transliterate(text)
    payload = {"input": text, "output": output, "contains_odia": contains_odia(output)}
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def transliterate_text(text: str):
    """Transliterate each whitespace-separated word, as committing with space would."""
    words = text.split()
    for word in words:
        print(f"   {word:<20} -> {transliterate(word)}")
    if len(words) > 1:
        print(f"\n📝 {' '.join(transliterate(w) for w in words)}")


def main():
    settings = get_settings()
    install_dictionary(WordDictionary(extra_file=settings.dictionary_file))
    print_header()

    while True:
        try:
            user_input = input("\n🔹 Enter text: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\nGoodbye!")
            break

        if not user_input:
            continue

        # Commands are case-insensitive, arguments are not ("T" != "t")
        lower_input = user_input.lower()

        if lower_input in ('q', 'quit', 'exit'):
            print("\nGoodbye!")
            break

        command, _, argument = user_input.partition(' ')
        argument = argument.strip()
        command = command.lower()

        if command in ('debug', 'suggest', 'num', 'json') and not argument:
            print(f"Usage: {command} <text>")
            continue

        if command == 'debug':
            debug_word(argument)
        elif command == 'suggest':
            show_suggestions(argument)
        elif command == 'num':
            show_numeral(argument)
        elif command == 'json':
            show_json_output(argument)
        else:
            transliterate_text(user_input)


if __name__ == "__main__":
    main()
