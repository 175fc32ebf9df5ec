"""spell command-line entry point.

Usage:
    spell [OPTIONS] "<text>"
    spell [OPTIONS] cast "<text>"
    spell [OPTIONS] reminder|note|timer|convert "<text>"
    spell [OPTIONS] reminder|note|timer|convert --list

Options:
    --config PATH     Path to YAML config file
    --profile NAME    Profile name (dev, prod, test)
    --examples PATH   Example corpus JSON file
    --verbose         Debug logging
    --json            Print the classification result as JSON
    --version         Show version

Exit codes:
    0  success
    1  usage or configuration error
    2  classification failed
    3  command handler failed
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from . import __version__
from .commands import Dispatcher, default_dispatcher
from .config import SpellConfig
from .config.loader import load_config
from .config.profiles import detect_profile
from .corpus import load_examples
from .errors import ConfigError, UnknownIntentError
from .logger import UnlabeledLog
from .nlp import IntentResult, NlpPipeline

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_PIPELINE_ERROR = 2
EXIT_HANDLER_ERROR = 3

MODULES = ("reminder", "note", "timer", "convert")
DIRECT_CONFIDENCE = 0.99

USAGE = """Usage:
  spell cast "<natural-language-command>"    Run NLP pipeline
  spell reminder "<text>"                    Add a reminder
  spell reminder --list                      List reminders
  spell note "<text>"                        Add a note
  spell note --list                          List notes
  spell timer "<text>"                       Start a timer
  spell timer --list                         List timers
  spell convert "<text>"                     Run conversion
  spell convert --list                       List conversions
  spell "<natural-language-command>"         Shortcut for cast"""

logger = logging.getLogger("spell")


def load_env() -> None:
    """Load .env from the project root, or the current directory."""
    env_file = Path(__file__).parent.parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)
    else:
        load_dotenv()


def setup_logging(level: str) -> None:
    """Configure logging based on config."""
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="spell",
        description="spell - classify natural-language commands and run them",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
{USAGE}

Environment:
  SPELL_PROFILE    Set profile (dev, prod, test)
""",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to YAML config file",
        metavar="PATH",
    )

    parser.add_argument(
        "--profile",
        choices=["dev", "prod", "test"],
        help="Configuration profile to use",
    )

    parser.add_argument(
        "--examples",
        type=Path,
        help="Example corpus JSON file (overrides config)",
        metavar="PATH",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the classification result as JSON",
    )

    parser.add_argument(
        "--list",
        "-l",
        action="store_true",
        help="List stored items of a module",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"spell v{__version__}",
    )

    parser.add_argument(
        "words",
        nargs="*",
        help="Command: cast, reminder, note, timer, convert, or free text",
    )

    return parser.parse_intermixed_args(argv)


def resolve_config(args: argparse.Namespace) -> SpellConfig:
    """Load configuration from --config, --profile or SPELL_PROFILE.

    A missing profile file falls back to defaults; a missing --config file
    is an error.
    """
    if args.config:
        return load_config(path=args.config)

    profile = args.profile or detect_profile().value
    try:
        return load_config(profile=profile)
    except FileNotFoundError:
        logger.debug(f"No config file for profile {profile}, using defaults")
        return SpellConfig()


def print_result(result: IntentResult, as_json: bool) -> None:
    if as_json:
        print(json.dumps(result.to_dict(), indent=2, default=str))
    print(f"Detected intent: {result.intent} (confidence {result.confidence:.2f})\n")


def run_lines(dispatcher: Dispatcher, result: IntentResult) -> None:
    for line in dispatcher.dispatch(result):
        print(line)


def execute_nlp_command(
    text: str,
    pipeline: NlpPipeline,
    dispatcher: Dispatcher,
    unlabeled: UnlabeledLog | None = None,
    as_json: bool = False,
) -> int:
    """Classify a command and run its handler.

    Args:
        text: Natural-language command.
        pipeline: Configured NLP pipeline.
        dispatcher: Intent handlers.
        unlabeled: Log for commands that could not be classified.
        as_json: Also print the result as JSON.

    Returns:
        Exit code
    """
    print(f'Processing (NLP): "{text}"\n')

    try:
        result = pipeline.handle(text)
    except Exception as e:
        logger.error(f"Pipeline failed for {text!r}: {e}")
        print(f"Error during pipeline handling: {e}", file=sys.stderr)
        return EXIT_PIPELINE_ERROR

    print_result(result, as_json)

    try:
        run_lines(dispatcher, result)
    except UnknownIntentError:
        print(f'Unknown spell: "{text}"')
        if unlabeled is not None:
            unlabeled.write(text, result)
    except Exception as e:
        logger.error(f"Handler for {result.intent} failed: {e}")
        print(f"Error while executing module: {e}", file=sys.stderr)
        return EXIT_HANDLER_ERROR

    return EXIT_OK


def execute_module_command(
    name: str,
    text: str,
    pipeline: NlpPipeline,
    dispatcher: Dispatcher,
    as_json: bool = False,
) -> int:
    """Run a handler directly, skipping classification.

    Entities are still extracted from the text.

    Returns:
        Exit code
    """
    result = IntentResult(
        intent=name,
        confidence=DIRECT_CONFIDENCE,
        raw_text=text,
        entities={"text": text},
    )
    pipeline.extractor.extract(text, result)

    if as_json:
        print(json.dumps(result.to_dict(), indent=2, default=str))

    try:
        run_lines(dispatcher, result)
    except Exception as e:
        logger.error(f"Handler for {name} failed: {e}")
        print(f"Error while executing {name}: {e}", file=sys.stderr)
        return EXIT_HANDLER_ERROR

    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Main entry point for spell.

    Args:
        argv: Arguments without the program name. Defaults to sys.argv.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    load_env()
    args = parse_args(argv)

    if not " ".join(args.words).strip():
        print(USAGE)
        return EXIT_OK

    try:
        config = resolve_config(args)
    except FileNotFoundError as e:
        print(f"Error: Config file not found: {e}", file=sys.stderr)
        return EXIT_USAGE
    except ConfigError as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return EXIT_USAGE

    setup_logging("DEBUG" if args.verbose else config.logging.level)
    logger.debug(f"spell v{__version__}, log level {config.logging.level}")

    command, rest = args.words[0], args.words[1:]
    text = " ".join(rest).strip()

    if command in MODULES and args.list:
        print(f"[{command}] List not implemented - {command}s are not stored.")
        return EXIT_OK

    examples_path = args.examples or Path(config.examples.path).expanduser()
    examples = load_examples(examples_path, auto_write=config.examples.auto_write)
    pipeline = NlpPipeline.from_examples(examples, config.classifier)
    dispatcher = default_dispatcher()

    if command in MODULES:
        if not text:
            print(f'Usage: spell {command} "<text>"  OR  spell {command} --list', file=sys.stderr)
            return EXIT_USAGE
        return execute_module_command(command, text, pipeline, dispatcher, args.json)

    if command == "cast":
        if not text:
            print(
                'Error: cast requires a string argument. Example: spell cast "remind me to call mom"',
                file=sys.stderr,
            )
            return EXIT_USAGE
    else:
        text = " ".join(args.words).strip()

    unlabeled = None
    if config.logging.log_unlabeled:
        unlabeled = UnlabeledLog(Path(config.logging.unlabeled_log).expanduser())

    return execute_nlp_command(text, pipeline, dispatcher, unlabeled, args.json)


if __name__ == "__main__":
    sys.exit(main())
