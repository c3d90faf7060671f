import textwrap

from .config import LINE_WIDTH

INDENT = "    "


def wrap_synopsis(text, width=LINE_WIDTH):
    """Greedy word wrap; a word longer than the line is kept whole on its own line."""
    return textwrap.wrap(
        text,
        width=width,
        initial_indent=INDENT,
        subsequent_indent=INDENT,
        break_long_words=False,
        break_on_hyphens=False,
    )


def render_raw(record, sink):
    sink.write(f"{record.name}\t{record.synopsis}\t{record.info}\n")


def render_formatted(record, sink, width=LINE_WIDTH):
    lines = [record.name]
    if record.synopsis:
        lines.extend(wrap_synopsis(record.synopsis, width))
    lines.append("")
    if record.info:
        lines.append(INDENT + record.info)
    lines.append("")
    sink.write("\n".join(lines) + "\n")


def render_record(record, sink, config):
    if config.raw:
        render_raw(record, sink)
    else:
        render_formatted(record, sink, config.width)


def render_records(records, sink, config):
    for record in records:
        render_record(record, sink, config)
    sink.flush()
