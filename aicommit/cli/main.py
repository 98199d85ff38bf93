"""CLI Main Entry Point"""

from aicommit.config import ConfigError, load_env_file, get_api_key
from aicommit.git import GitError, is_git_repository, get_staged_diff, commit_changes
from aicommit.llm import DeepSeekClient, LLMError
from aicommit.output import bold, dim, disable_colors, print_error, print_success, Spinner

from aicommit.cli.args import parse_args
from aicommit.cli.utils import InputError, confirm

CONFIRM_PROMPT = "Do you want to commit these changes? (y/n)"


def _generate_message(client, diff):
    """Run LLM generation with spinner and return response."""
    with Spinner(f"Asking {client.name}..."):
        return client.generate(diff)


def _display_message(message):
    print(bold("Generated commit message:"))
    print(message)


def _print_verbose_stats(args, response):
    if not args.verbose:
        return
    print(dim(f"  Model: {response.model}"))
    print(dim(f"  Tokens: {response.tokens_used}"))


def run(args) -> int:
    """Repository check, diff, generate, confirm, commit. Every failure ends the run.

    Returns:
        int: Exit code
    """
    if not is_git_repository():
        print_error("Current directory is not a Git repository.")
        return 1

    load_env_file()

    try:
        diff = get_staged_diff()
    except GitError as e:
        print_error(f"Error getting git diff: {e}")
        return 1

    if not diff:
        print("No changes detected.")
        return 0

    try:
        api_key = get_api_key()
    except ConfigError as e:
        print_error(str(e))
        return 1

    try:
        client = DeepSeekClient(api_key=api_key)
        response = _generate_message(client, diff)
    except LLMError as e:
        print_error(f"Error generating commit message: {e}")
        return 1

    _display_message(response.content)
    _print_verbose_stats(args, response)

    try:
        accepted = confirm(CONFIRM_PROMPT)
    except InputError as e:
        print_error(str(e))
        return 1

    if not accepted:
        print("Commit canceled.")
        return 0

    try:
        commit_changes(response.content)
    except GitError as e:
        print_error(f"Error committing changes: {e}")
        return 1

    print_success("Changes committed successfully.")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)
    if args.no_color:
        disable_colors()
    return run(args)
