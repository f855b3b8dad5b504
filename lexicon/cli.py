"""Interactive terminal harness for a Lexicon."""

from __future__ import annotations

from lexicon.loader import add_from_file
from lexicon.trie import Lexicon

HELP = """\
Commands:
  add WORD               -- insert a word
  has WORD               -- is WORD a member?
  prefix PREFIX          -- does any word start with PREFIX?
  remove WORD            -- remove one word
  remove-prefix PREFIX   -- remove every word starting with PREFIX
  list [PREFIX]          -- print members (optionally under PREFIX)
  size                   -- number of words
  empty                  -- is the lexicon empty?
  load PATH [lower]      -- add words from a file
  clear                  -- remove everything
  destroy                -- release the lexicon and exit
  quit                   -- exit"""

# Commands taking exactly one argument, mapped to the Lexicon method they call.
_UNARY = {
    "has": "contains_word",
    "prefix": "contains_prefix",
    "remove": "remove",
    "remove-prefix": "remove_prefix",
}


def _fmt(value: bool) -> str:
    return "true" if value else "false"


def dispatch(lex: Lexicon, line: str) -> str | None:
    """Run one harness command and return the text to print.

    Returns None when the harness should stop.
    """
    parts = line.split()
    if not parts:
        return ""
    cmd, args = parts[0].lower(), parts[1:]

    if cmd in ("quit", "exit"):
        return None
    if cmd == "help":
        return HELP
    if cmd == "destroy":
        lex.destroy()
        return None

    if cmd == "add" and len(args) == 1:
        try:
            return _fmt(lex.insert(args[0]))
        except ValueError as exc:
            return f"  Invalid word: {exc}"
    if cmd in _UNARY and len(args) == 1:
        return _fmt(getattr(lex, _UNARY[cmd])(args[0]))
    if cmd == "list" and len(args) <= 1:
        words = lex.words_with_prefix(args[0] if args else "")
        return "\n".join(words) if words else "  (no words)"
    if cmd == "size" and not args:
        return str(lex.size())
    if cmd == "empty" and not args:
        return _fmt(lex.is_empty())
    if cmd == "clear" and not args:
        lex.clear()
        return "  Lexicon cleared."
    if cmd == "load" and args and len(args) <= 2:
        is_lower = len(args) == 2 and args[1].lower() == "lower"
        if len(args) == 2 and not is_lower:
            return "  Format: load PATH [lower]"
        ok = add_from_file(lex, args[0], is_lower_case=is_lower)
        return f"{_fmt(ok)} ({lex.size():,} words)"

    return f"  Unknown or malformed command: {line.strip()!r} (try 'help')"


def run_cli(lex: Lexicon) -> None:
    """Read commands from the terminal until quit, destroy or EOF."""
    print("\n" + "=" * 60)
    print("  LEXICON -- Interactive Test Harness")
    print("=" * 60)
    print()
    print(HELP)
    print()

    while True:
        try:
            inp = input("  lex> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        out = dispatch(lex, inp)
        if out is None:
            break
        if out:
            print(out)

    if lex.is_destroyed:
        print("  Lexicon destroyed.")
    else:
        print(f"  Done. {lex.size():,} words in lexicon.")
