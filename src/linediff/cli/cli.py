"""CLI entrypoint: Typer app definition and command registration"""

import typer

from linediff.cli.commands import callback, clear_cmd, diff_cmd, history_cmd, init_cmd, show_cmd, stats_cmd


app = typer.Typer(name="linediff", no_args_is_help=True, help="Line-based text diff with comparison history")

app.callback()(callback)
app.command(name="diff")(diff_cmd)
app.command(name="stats")(stats_cmd)
app.command(name="history")(history_cmd)
app.command(name="show")(show_cmd)
app.command(name="clear")(clear_cmd)
app.command(name="init")(init_cmd)
