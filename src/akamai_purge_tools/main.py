from akamai_purge_tools import config, purge
import typer

app = typer.Typer(no_args_is_help=True)
app.command()(purge.purge)
app.add_typer(config.app, name="config")
