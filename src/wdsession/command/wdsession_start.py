"""
Start a WebDriver session from a YAML/JSON configuration and report what was negotiated.

> wdsession-start --config remote.yaml
> wdsession-start --config remote.yaml --dry-run
"""
import json
import logging
import sys

import click

from wdsession.common.logger import setup_logging
from wdsession.config import RemoteConfig
from wdsession.protocol import detect_driver_profile, select_command_vocabulary
from wdsession.session import RequestsTransport, SessionBootstrapper, SessionError


def _echo_json(payload):
    click.echo(json.dumps(payload, indent=2, sort_keys=True, default=str))


@click.command(name="wdsession-start")
@click.option('--config', '-c', 'config_path', default=None,
              help='Path to the remote configuration file (YAML or JSON).',
              type=click.Path(exists=True, dir_okay=False))
@click.option('--protocol', default=None, type=click.Choice(['http', 'https']), help='Override the protocol.')
@click.option('--hostname', '-H', default=None, help='Override the hostname.')
@click.option('--port', '-p', default=None, type=int, help='Override the port.')
@click.option('--path', default=None, help='Override the base path.')
@click.option('--dry-run', is_flag=True, help='Print the new-session request without sending it.')
@click.option('--log-config', default=None, type=click.Path(exists=True, dir_okay=False),
              help='Logging dictConfig file (YAML or JSON).')
@click.option('--log-file', default=None, type=click.Path(dir_okay=False),
              help='Write logs to this file.')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging.')
def run(config_path, protocol, hostname, port, path, dry_run, log_config, log_file, verbose):
    """
    Negotiate a session and print its id, agreed capabilities and command vocabulary.
    """
    logger = setup_logging(config_file_path=log_config, log_file_path=log_file, verbose=verbose)

    overrides = dict(protocol=protocol, hostname=hostname, port=port, path=path)
    overrides = {key: value for key, value in overrides.items() if value is not None}
    try:
        if config_path:
            config = RemoteConfig.from_file(config_path, **overrides)
        else:
            config = RemoteConfig(**overrides)
    except (ValueError, OSError) as e:
        click.echo(f"Error: invalid configuration: {e}", err=True)
        sys.exit(2)

    if not verbose:
        logging.getLogger("wdsession").setLevel(config.logging_level())

    bootstrapper = SessionBootstrapper(
        RequestsTransport(timeout=config.connection_timeout, verify=config.strict_ssl),
        headers=config.request_headers(),
    )

    try:
        if dry_run:
            coordinates, body = bootstrapper.prepare(config.coordinates(), config.capabilities)
            _echo_json({"url": coordinates.session_url(), "body": body})
            return
        result = bootstrapper.start(config.coordinates(), config.capabilities)
    except SessionError as e:
        logger.error(f"Failed to start session: {e}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    profile = detect_driver_profile(
        result.capabilities,
        result.requested_capabilities,
        hostname=config.hostname,
    )
    vocabulary = select_command_vocabulary(profile)
    _echo_json({
        "sessionId": result.session_id,
        "capabilities": result.capabilities,
        "profile": {name: getattr(profile, name) for name in profile.__dataclass_fields__},
        "commands": sorted(vocabulary),
    })


if __name__ == "__main__":
    run()
