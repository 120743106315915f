#!/usr/bin/env python3
"""Main entry point for the AI Writer."""

import argparse
import asyncio
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

# Load environment variables
from dotenv import load_dotenv
load_dotenv()

from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table

from ai_writer.infrastructure.config import ApplicationConfig, load_config
from ai_writer.infrastructure.error_handling import AIWriterError
from ai_writer.infrastructure.logging import get_logger, setup_logging
from ai_writer.models.writing import GenerationRequest, Tone, WritingType
from ai_writer.services.export import export_pdf, export_text
from ai_writer.workflows.writing import WritingWorkflow, create_writing_workflow

console = Console()
logger = get_logger(__name__)

# Suggestion is an internal type; users pick one of these.
USER_WRITING_TYPES = [WritingType.EMAIL.value, WritingType.BLOG.value, WritingType.STORY.value]
TONES = [tone.value for tone in Tone]


class WriterCLI:
    """Command-line interface for the AI Writer."""

    def __init__(self, config: ApplicationConfig):
        self.config = config
        self.workflow: Optional[WritingWorkflow] = None

    async def _ensure_workflow(self) -> WritingWorkflow:
        """Lazy initialization of workflow."""
        if self.workflow is None:
            self.workflow = await create_writing_workflow(self.config)
        return self.workflow

    async def close(self) -> None:
        if self.workflow is not None:
            await self.workflow.close()

    async def generate(self, content: str, writing_type: str, tone: str) -> bool:
        workflow = await self._ensure_workflow()
        request = GenerationRequest(content, WritingType(writing_type), Tone(tone))

        with console.status("[bold green]Generating content..."):
            outcome = await workflow.generate(request)

        if not outcome.success:
            console.print(f"[bold red]{outcome.display_text}[/bold red]")
            return False

        console.print(Panel(Markdown(outcome.text), title=f"{tone.title()} {writing_type}", border_style="green"))
        console.print("[dim]Saved to history[/dim]")
        return True

    async def improve(self, content: str, writing_type: str, tone: str) -> bool:
        workflow = await self._ensure_workflow()
        request = GenerationRequest(content, WritingType(writing_type), Tone(tone))

        with console.status("[bold blue]Improving prompt..."):
            improved = await workflow.improve_prompt(request)

        if not improved:
            console.print("[yellow]No usable improved prompt was returned; keep your original prompt.[/yellow]")
            return False

        console.print(Panel(improved, title="Improved Prompt", border_style="blue"))
        return True

    async def suggest(self, text: str) -> bool:
        workflow = await self._ensure_workflow()
        outcome = await workflow.suggest_result(text)
        if outcome is None:
            console.print("[dim]No suggestion right now, try again in a moment.[/dim]")
            return False
        if not outcome.success:
            console.print(f"[bold red]{outcome.display_text}[/bold red]")
            return False
        console.print(f"{text} [italic cyan]{outcome.text}[/italic cyan]")
        return True

    async def list_history(self) -> None:
        workflow = await self._ensure_workflow()
        items = await workflow.history.list_items()

        if not items:
            console.print("[yellow]No history yet.[/yellow]")
            return

        table = Table(title=f"History ({len(items)})")
        table.add_column("ID", style="cyan", width=36)
        table.add_column("Type", style="green")
        table.add_column("Tone", style="yellow")
        table.add_column("Created", style="white")
        table.add_column("Preview", style="white")

        for item in items:
            created = datetime.fromtimestamp(item.timestamp / 1000).strftime("%Y-%m-%d %H:%M")
            table.add_row(item.id, item.type.value, item.tone.value, created, item.preview)

        console.print(table)

    async def show_history(self, item_id: str) -> bool:
        workflow = await self._ensure_workflow()
        item = await workflow.history.get(item_id)
        if item is None:
            console.print(f"[bold red]Error:[/bold red] History item not found: {item_id}")
            return False
        console.print(Panel(Markdown(item.content), title=f"{item.tone.value.title()} {item.type.value}"))
        return True

    async def delete_history(self, item_id: str) -> bool:
        workflow = await self._ensure_workflow()
        if not await workflow.history.delete(item_id):
            console.print(f"[bold red]Error:[/bold red] History item not found: {item_id}")
            return False
        console.print("[green]Deleted.[/green]")
        return True

    async def clear_history(self, assume_yes: bool) -> bool:
        if not assume_yes:
            answer = console.input("Clear all history? This action cannot be undone. [y/N] ")
            if answer.strip().lower() not in ("y", "yes"):
                console.print("[dim]Cancelled.[/dim]")
                return False
        workflow = await self._ensure_workflow()
        await workflow.history.clear()
        console.print("[green]History cleared.[/green]")
        return True

    async def export(self, export_format: str, item_id: Optional[str], text: Optional[str], output: Optional[str]) -> bool:
        if item_id:
            workflow = await self._ensure_workflow()
            item = await workflow.history.get(item_id)
            if item is None:
                console.print(f"[bold red]Error:[/bold red] History item not found: {item_id}")
                return False
            content = item.content
        else:
            content = text or ""

        directory = Path(output or self.config.export_dir)
        if export_format == "pdf":
            path = export_pdf(content, directory, page_size=self.config.pdf_page_size)
        else:
            path = export_text(content, directory)

        console.print(f"[green]Exported to[/green] {path}")
        return True


def _add_request_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("content", help="Your prompt or text")
    parser.add_argument(
        "--type",
        dest="writing_type",
        choices=USER_WRITING_TYPES,
        default=WritingType.EMAIL.value,
        help="Writing type (default: email)"
    )
    parser.add_argument(
        "--tone",
        choices=TONES,
        default=Tone.FORMAL.value,
        help="Tone of the writing (default: formal)"
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser."""
    parser = argparse.ArgumentParser(
        description="AI Writer: generate emails, blog posts and stories",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ai-writer generate "quarterly update" --type email --tone formal
  ai-writer improve "a story about a lighthouse" --type story
  ai-writer suggest "The meeting has been moved to"
  ai-writer history list
  ai-writer export --format pdf --id <history id>
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    generate_parser = subparsers.add_parser("generate", help="Generate writing from a prompt")
    _add_request_arguments(generate_parser)

    improve_parser = subparsers.add_parser("improve", help="Improve a prompt before generating")
    _add_request_arguments(improve_parser)

    suggest_parser = subparsers.add_parser("suggest", help="Suggest a continuation for a sentence")
    suggest_parser.add_argument("text", help="Sentence to continue")

    history_parser = subparsers.add_parser("history", help="Manage generation history")
    history_sub = history_parser.add_subparsers(dest="history_command", help="History commands")
    history_sub.add_parser("list", help="List saved results, newest first")
    show_parser = history_sub.add_parser("show", help="Show one saved result")
    show_parser.add_argument("id", help="History item ID")
    delete_parser = history_sub.add_parser("delete", help="Delete one saved result")
    delete_parser.add_argument("id", help="History item ID")
    clear_parser = history_sub.add_parser("clear", help="Delete all saved results")
    clear_parser.add_argument("--yes", "-y", action="store_true", help="Do not ask for confirmation")

    export_parser = subparsers.add_parser("export", help="Export text to a .txt or .pdf file")
    export_parser.add_argument("--format", dest="export_format", choices=["txt", "pdf"], default="txt")
    source = export_parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--id", dest="item_id", help="History item to export")
    source.add_argument("--text", help="Text to export")
    export_parser.add_argument("--output", help="Output directory")

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    return parser


async def dispatch(cli: WriterCLI, args: argparse.Namespace, parser: argparse.ArgumentParser) -> bool:
    """Run the command selected on the command line."""
    if args.command == "generate":
        return await cli.generate(args.content, args.writing_type, args.tone)
    if args.command == "improve":
        return await cli.improve(args.content, args.writing_type, args.tone)
    if args.command == "suggest":
        return await cli.suggest(args.text)
    if args.command == "history":
        if args.history_command == "list":
            await cli.list_history()
            return True
        if args.history_command == "show":
            return await cli.show_history(args.id)
        if args.history_command == "delete":
            return await cli.delete_history(args.id)
        if args.history_command == "clear":
            return await cli.clear_history(args.yes)
    if args.command == "export":
        return await cli.export(args.export_format, args.item_id, args.text, args.output)

    parser.print_help()
    return False


async def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    config = load_config()
    log_level = "DEBUG" if args.verbose else config.log_level
    setup_logging(level=log_level, format_type=config.log_format, log_file=config.log_to_file)

    cli = WriterCLI(config)
    try:
        success = await dispatch(cli, args, parser)
        return 0 if success else 1
    except AIWriterError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        return 1
    except KeyboardInterrupt:
        console.print("\n\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except Exception as e:
        logger.error("Application error", error=str(e))
        console.print(f"[bold red]Unexpected error:[/bold red] {e}")
        return 1
    finally:
        await cli.close()


def run() -> None:
    """Console script entry point."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
