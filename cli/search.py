"""
Search commands for PageSift CLI.
"""

import click

from pagesift import PageSift
from pagesift.exceptions import FetchError, InvalidRequestError
from pagesift.storage.database import DatabaseManager
from pagesift.utils.helpers import truncate_text


@click.command()
@click.argument('url')
@click.argument('query')
@click.option('--max-results', '-n', type=int, help='Number of chunks to return')
@click.option('--max-tokens', '-t', type=int, help='Maximum estimated tokens per chunk')
@click.option('--max-content', type=int, default=300, help='Maximum content length to display')
@click.option('--parser', is_flag=True, help='Reduce markup with an HTML parser instead of regexes')
@click.option('--no-record', is_flag=True, help='Do not store the search in the database')
@click.pass_context
def search_cmd(ctx, url, query, max_results, max_tokens, max_content, parser, no_record):
    """Search the page at URL for passages relevant to QUERY."""
    config = ctx.obj['config']

    if parser:
        config.reducer_mode = 'parser'

    pagesift = PageSift(config=config)
    click.echo(f"Searching {url} for: '{query}'")

    try:
        if no_record:
            outcome = pagesift.search(url, query, max_results=max_results, max_tokens_per_chunk=max_tokens)
        else:
            outcome = pagesift.submit(url, query, max_results=max_results, max_tokens_per_chunk=max_tokens)
    except (FetchError, InvalidRequestError) as e:
        raise click.ClickException(str(e))
    finally:
        pagesift.close()

    if not outcome.success:
        raise click.ClickException(f"Search failed: {outcome.error_message}")

    if not outcome.chunks:
        click.echo("No results found.")
    else:
        _print_results(outcome, max_content_length=max_content)

    click.echo(f"\n{outcome.results_count} of {outcome.total_chunks} chunks "
               f"in {outcome.processing_time_ms}ms ({outcome.tier} match)")


@click.command()
@click.option('--limit', '-l', type=int, default=20, help='Number of recent searches to show')
@click.pass_context
def history_cmd(ctx, limit):
    """Show search history and statistics."""
    db_manager = DatabaseManager(ctx.obj['config'])

    stats = db_manager.get_search_stats()

    click.echo("Search Statistics:")
    click.echo(f"  Total searches: {stats['total_searches']}")
    click.echo(f"  Completed: {stats['completed_searches']}")
    click.echo(f"  Failed: {stats['failed_searches']}")
    click.echo(f"  Average processing time: {stats['avg_processing_time_ms']:.1f}ms")
    click.echo(f"  Total results found: {stats['total_results_found']}")

    recent_searches = db_manager.get_recent_searches(limit)

    if recent_searches:
        click.echo(f"\nRecent Searches (last {len(recent_searches)}):")
        for search in recent_searches:
            click.echo(f"  {search['created_at']} [{search['status']}]")
            click.echo(f"    URL: {search['website_url']}")
            click.echo(f"    Query: {search['search_query']}")
            if search['status'] == 'failed':
                click.echo(f"    Error: {search['error_message']}")
            else:
                click.echo(f"    Results: {search['results_count']}, Time: {search['processing_time_ms']}ms")
            click.echo()


def _print_results(outcome, max_content_length=300):
    """Print ranked chunks in a formatted way."""
    for rank, chunk in enumerate(outcome.chunks, start=1):
        click.echo(f"\n{'='*60}")
        click.echo(f"Rank {rank} | Score: {chunk.relevance_score:.4f} | Chunk #{chunk.chunk_index}")
        click.echo(f"Context: {chunk.content_context} | ~{chunk.estimated_tokens} tokens")
        click.echo("-" * 60)
        click.echo(truncate_text(chunk.content, max_content_length))
