import asyncio
import os
import sys

import click
from dotenv import load_dotenv

from .logging_config import log_operation, setup_logger

__version__ = "0.1.0"


@click.command()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.option(
    "--transport",
    type=click.Choice(["stdio", "sse", "streamable-http"]),
    default="stdio",
    help="Transport type (stdio, sse or streamable-http)",
)
@click.option(
    "--host",
    default="0.0.0.0",  # noqa: S104
    help="Host to bind to for HTTP transports",
)
@click.option(
    "--port",
    default=8000,
    help="Port to listen on for HTTP transports",
)
@click.option(
    "--log-dir",
    help="Directory to store log files",
)
@click.option(
    "--log-to-file/--no-log-to-file",
    default=False,
    help="Enable/disable file logging",
)
@click.option(
    "--jira-base-url",
    help="Jira base URL (e.g., https://jira.your-company.com)",
)
@click.option("--jira-username", help="Jira username")
@click.option("--jira-password", help="Jira password")
@click.option(
    "--jira-ssl-verify/--no-jira-ssl-verify",
    default=True,
    help="Verify SSL certificates for the Jira server (default: verify)",
)
def main(
    verbose: int,
    env_file: str | None,
    transport: str,
    host: str,
    port: int,
    log_dir: str | None,
    log_to_file: bool,
    jira_base_url: str | None,
    jira_username: str | None,
    jira_password: str | None,
    jira_ssl_verify: bool,
) -> None:
    """MCP Jira Legacy Server - read-only Jira 4.x tools for MCP."""
    logging_level = None
    if verbose == 1:
        logging_level = "INFO"
    elif verbose >= 2:
        logging_level = "DEBUG"

    app_logger = setup_logger(
        level=logging_level,
        log_to_file=log_to_file,
        log_dir=log_dir,
        # Model modules log under their import path
        extra_loggers=(__name__,),
    )

    with log_operation(app_logger, "application_startup", app_version=__version__):
        # Load environment variables from file if specified, otherwise try default .env
        if env_file:
            app_logger.info(f"Loading environment from file: {env_file}")
            load_dotenv(env_file)
        else:
            app_logger.debug("Attempting to load environment from default .env file")
            load_dotenv()

        # Command line arguments override the environment
        if jira_base_url:
            os.environ["JIRA_BASE_URL"] = jira_base_url
        if jira_username:
            os.environ["JIRA_USERNAME"] = jira_username
        if jira_password:
            os.environ["JIRA_PASSWORD"] = jira_password
        if not jira_ssl_verify:
            os.environ["JIRA_SSL_VERIFY"] = "false"

        from .servers import main_mcp

        app_logger.info(
            f"Starting MCP Jira Legacy v{__version__} with {transport} transport"
        )

    run_kwargs: dict = {"transport": transport}
    if transport != "stdio":
        run_kwargs.update(host=host, port=port)
    try:
        asyncio.run(main_mcp.run_async(**run_kwargs))
    except KeyboardInterrupt:
        app_logger.info("Server stopped by user")
    except Exception as e:
        app_logger.error(f"Error running server: {e}", exc_info=True)
        sys.exit(1)


__all__ = ["main", "__version__", "setup_logger", "log_operation"]

if __name__ == "__main__":
    main()
