#!/usr/bin/env python3
"""
Tossup Generator - Main CLI Entry Point

Turns Wikipedia's vital articles into quiz-bowl style tossups.
"""

import random
import sys

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich import box

from config import Settings, load_settings, setup_logging
from models import ALL_TOPICS, Question
from repositories import CorpusNotFound, get_repository
from sources import SourceError, WikipediaClient, crawl_vital_articles
from tossup import LEAD_IN, PacketBuilder, QuestionError, generate_question
from tossup.markup import MARKER_CLOSE, MARKER_OPEN
from tossup.render import polish_hint

console = Console()


def hint_text(hint: str) -> Text:
    """Render one hint with placeholders highlighted."""
    text = Text()
    rest = polish_hint(hint)
    if rest.startswith(LEAD_IN):
        text.append(LEAD_IN, style="bold")
        rest = rest[len(LEAD_IN):]
    while MARKER_OPEN in rest:
        before, _, after = rest.partition(MARKER_OPEN)
        placeholder, _, rest = after.partition(MARKER_CLOSE)
        text.append(before)
        text.append(placeholder, style="italic cyan")
    text.append(rest)
    return text


def show_question(question: Question, number: int = 1):
    """Print a question as a panel, answer underneath."""
    body = Text(" ").join(hint_text(h) for h in question.hints)
    body.append("\n\nAnswer: ", style="bold")
    body.append(question.display_answer, style="green")
    body.append(f"  {question.answer_url}", style="dim")
    console.print(Panel(body, title=f"{number}. {question.topic_label}", title_align="left"))


def load_corpus(settings: Settings):
    repo = get_repository(settings.corpus_path)
    try:
        return repo.load()
    except CorpusNotFound as e:
        console.print(f"[red]{e}[/red]")
        console.print("[dim]Build one with: python cli.py crawl[/dim]")
        sys.exit(1)


def cmd_generate(args, settings: Settings):
    """Generate a packet from the corpus."""
    corpus = load_corpus(settings)
    if not 1 <= args.difficulty <= corpus.levels:
        console.print(f"[red]Difficulty must be between 1 and {corpus.levels}[/red]")
        sys.exit(1)

    builder = PacketBuilder(
        corpus,
        WikipediaClient(settings).fetch_article_text,
        attempts=settings.attempts_per_question,
        rng=random.Random(args.seed),
    )
    with console.status("[dim]Generating questions...[/dim]"):
        questions = builder.build(args.count, args.difficulty, args.topic)

    for i, question in enumerate(questions, 1):
        show_question(question, i)
    if len(questions) < args.count:
        console.print(f"[yellow]Only {len(questions)} of {args.count} questions could be generated.[/yellow]")


def cmd_question(args, settings: Settings):
    """Generate one question for a given answer, reporting why it fails."""
    client = WikipediaClient(settings)
    try:
        question = generate_question(
            args.topic, args.answer, client.fetch_article_text,
            rng=random.Random(args.seed),
        )
    except QuestionError as e:
        console.print(f"[red]{e.kind}[/red] {e}")
        sys.exit(2)
    except SourceError as e:
        console.print(f"[red]Fetch failed:[/red] {e}")
        sys.exit(1)
    show_question(question)


def cmd_crawl(args, settings: Settings):
    """Build the vital articles corpus."""
    client = WikipediaClient(settings)
    with console.status("[dim]Crawling vital article categories...[/dim]"):
        try:
            corpus = crawl_vital_articles(client, levels=settings.max_difficulty)
        except SourceError as e:
            console.print(f"[red]Crawl failed:[/red] {e}")
            sys.exit(1)
    get_repository(settings.corpus_path).save(corpus)

    table = Table(title="Vital articles", box=box.SIMPLE)
    table.add_column("Level", style="cyan")
    table.add_column("Topics", justify="right")
    table.add_column("Articles", justify="right")
    for level in range(1, corpus.levels + 1):
        topics = corpus.level(level)
        table.add_row(str(level), str(len(topics)), str(sum(len(a) for a in topics.values())))
    console.print(table)
    console.print(f"[green]Saved to {settings.corpus_path}[/green]")


def cmd_serve(args, settings: Settings):
    """Run the web UI."""
    from app import app
    console.print(f"[dim]Web UI at http://localhost:{settings.web_port}[/dim]")
    app.run(port=settings.web_port)


def cli(argv=None):
    """Main CLI entry point"""
    import argparse

    parser = argparse.ArgumentParser(
        description="Generate gated-disclosure trivia questions from Wikipedia",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  tossup crawl                         # Build vital-articles.json
  tossup generate -n 10 -d 3           # Ten questions, difficulty 3
  tossup generate -t Geography         # Only geography
  tossup question People "Ada Lovelace"
  tossup serve                         # Web UI
        """
    )
    parser.add_argument("--config", "-c", help="Settings YAML (default: tossup.yaml)")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate a packet of questions")
    gen.add_argument("--topic", "-t", default=ALL_TOPICS, help="Topic label or All")
    gen.add_argument("--count", "-n", type=int, default=5, help="Number of questions")
    gen.add_argument("--difficulty", "-d", type=int, default=1, help="Vital article level (1 = easiest)")
    gen.add_argument("--seed", type=int, help="Random seed")
    gen.set_defaults(func=cmd_generate)

    one = sub.add_parser("question", help="Generate a question for one answer")
    one.add_argument("topic", help="Topic label, e.g. People")
    one.add_argument("answer", help="Article title")
    one.add_argument("--seed", type=int, help="Random seed")
    one.set_defaults(func=cmd_question)

    crawl = sub.add_parser("crawl", help="Build the vital articles corpus")
    crawl.set_defaults(func=cmd_crawl)

    serve = sub.add_parser("serve", help="Run the web UI")
    serve.set_defaults(func=cmd_serve)

    args = parser.parse_args(argv)
    settings = load_settings(args.config)
    setup_logging(settings.log_level)
    args.func(args, settings)


if __name__ == "__main__":
    cli()
