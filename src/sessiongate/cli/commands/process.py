"""The ``process`` command: call the backend's toProcess action."""

import json
from typing import Optional

import click
from pydantic import ValidationError

from sessiongate.models import ProcessRequest

from ..output import build_client, emit_result, resolve_credentials


def parse_params(raw: Optional[str]):
    """Parse ``--params``: JSON when it decodes, the plain string otherwise."""
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


@click.command()
@click.argument("tx", type=int)
@click.option("--params", "raw_params", help="JSON object, string, number or null")
@click.option("--username", "-u", help="Log in first with this account")
@click.option("--password", "-p", help="Account password (prompted when omitted)")
@click.pass_context
def process(
    ctx: click.Context,
    tx: int,
    raw_params: Optional[str],
    username: Optional[str],
    password: Optional[str],
) -> None:
    """Run backend action TX with optional parameters.

    \b
    Examples:
        sessiongate process 5 --params '{"a": 1}' -u alice@example.com
        sessiongate process 7 --params hello
    """
    try:
        request = ProcessRequest(tx=tx, params=parse_params(raw_params))
    except ValidationError as e:
        raise click.BadParameter(e.errors()[0]["msg"], param_hint="--params")

    credentials = resolve_credentials(username, password)
    with build_client(ctx) as client:
        if credentials is not None:
            result = client.login(credentials.username, credentials.password)
            if not result.ok:
                ctx.exit(emit_result(result))
        ctx.exit(emit_result(client.to_process(request.tx, request.params)))
