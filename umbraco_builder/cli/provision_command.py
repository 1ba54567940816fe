"""Provision command orchestration for CLI.

This module provides the ProvisionCommand class that wires the Management API
client, the identifier resolver and the builders together and runs the
requested provisioning steps in dependency order.
"""

import logging
from typing import Callable, Dict, List, Optional

import requests

from umbraco_builder.builders import (
    CompositionsBuilder,
    DataTypesBuilder,
    DictionaryItemsBuilder,
    DocumentsBuilder,
    DocumentTypesBuilder,
    ElementTypesBuilder,
    MediaBuilder,
    TemplatesBuilder,
)
from umbraco_builder.cli.config import ConfigLoader
from umbraco_builder.cli.errors import CLIError
from umbraco_builder.cli.models import BuilderConfig, ExitCode, RunSummary, STEP_DESCRIPTIONS
from umbraco_builder.cli.output import OutputHandler
from umbraco_builder.management_client.api_wrapper import ManagementApi
from umbraco_builder.management_client.auth import Authenticator
from umbraco_builder.management_client.errors import (
    APIUnreachableError,
    AuthError,
    BuilderError,
    FetchError,
    NotFoundError,
    ValidationError,
)
from umbraco_builder.management_client.token_cache import TokenCache
from umbraco_builder.resolution.identifier_resolver import IdentifierResolver

logger = logging.getLogger(__name__)


class ProvisionCommand:
    """Orchestrates a provisioning run for the CLI.

    The workflow:
        1. Load the run configuration (YAML, optional)
        2. Load credentials from the environment
        3. Build one TokenCache, ManagementApi and IdentifierResolver shared
           by every builder
        4. Run the requested steps in dependency order, stopping at the first
           failure
        5. Print a summary and return an exit code

    Example:
        >>> output = OutputHandler(verbosity=1)
        >>> command = ProvisionCommand(output_handler=output)
        >>> exit_code = command.run(steps=["templates", "media"])
    """

    def __init__(
        self,
        config_path: str = ConfigLoader.DEFAULT_CONFIG_FILE,
        config: Optional[BuilderConfig] = None,
        output_handler: Optional[OutputHandler] = None,
        authenticator: Optional[Authenticator] = None,
        session: Optional[requests.Session] = None,
    ):
        """Initialize provision command with dependencies.

        Args:
            config_path: Path to the YAML run configuration
            config: Preloaded configuration (skips loading config_path)
            output_handler: OutputHandler for terminal output (optional)
            authenticator: Authenticator for credentials (optional)
            session: HTTP session for Management API calls (optional); the token
                cache always opens its own
        """
        self.config_path = config_path
        self.config = config
        self.output_handler = output_handler or OutputHandler()
        self.authenticator = authenticator
        self.session = session

    def run(self, steps: Optional[List[str]] = None) -> ExitCode:
        """Run the provisioning steps.

        Args:
            steps: Step names to run; defaults to the configured steps

        Returns:
            ExitCode indicating success or specific failure type
        """
        summary = RunSummary()
        current_step: Optional[str] = None

        try:
            if self.config is None:
                logger.info(f"Loading configuration from {self.config_path}")
                self.config = ConfigLoader.load(self.config_path)
            config = self.config

            selected = ConfigLoader.validate_steps(steps, 'step') if steps else config.steps

            if not self.authenticator:
                self.authenticator = Authenticator()
            credentials = self.authenticator.get_credentials()
            self.output_handler.info(f"Provisioning {credentials.host}")

            session = self.session or requests.Session()
            token_cache = TokenCache(credentials, session=requests.Session(), timeout=config.timeout)
            api = ManagementApi(
                credentials,
                token_cache,
                session=session,
                timeout=config.timeout,
                page_size=config.page_size,
            )
            actions = self._build_actions(config, api, IdentifierResolver(api))

            for step in selected:
                current_step = step
                logger.info(f"Running step '{step}'")
                with self.output_handler.spinner(f"{STEP_DESCRIPTIONS[step]}..."):
                    actions[step]()
                summary.completed.append(step)
                self.output_handler.success(STEP_DESCRIPTIONS[step])
            current_step = None

            self.output_handler.print_summary(summary)
            return ExitCode.SUCCESS

        except AuthError as e:
            return self._fail(summary, current_step, f"Authentication failed: {e}", ExitCode.AUTH_ERROR)

        except APIUnreachableError as e:
            return self._fail(summary, current_step, f"API error: {e}", ExitCode.NETWORK_ERROR)

        except (NotFoundError, FetchError, ValidationError) as e:
            return self._fail(summary, current_step, f"Resolution failed: {e}", ExitCode.RESOLUTION_ERROR)

        except CLIError as e:
            return self._fail(summary, current_step, f"Configuration error: {e}", ExitCode.GENERAL_ERROR)

        except BuilderError as e:
            return self._fail(summary, current_step, f"Error: {e}", ExitCode.GENERAL_ERROR)

        except Exception as e:
            logger.exception("Unexpected error during provisioning")
            summary.failed = current_step
            summary.error = str(e)
            self.output_handler.error(f"Unexpected error: {e}")
            if current_step:
                self.output_handler.print_summary(summary)
            return ExitCode.GENERAL_ERROR

    def _fail(
        self,
        summary: RunSummary,
        current_step: Optional[str],
        message: str,
        exit_code: ExitCode,
    ) -> ExitCode:
        logger.error(message)
        self.output_handler.error(message)
        summary.failed = current_step
        summary.error = message
        if current_step:
            self.output_handler.print_summary(summary)
        return exit_code

    @staticmethod
    def _build_actions(
        config: BuilderConfig,
        api: ManagementApi,
        resolver: IdentifierResolver,
    ) -> Dict[str, Callable[[], None]]:
        data_types = DataTypesBuilder(api, resolver)
        return {
            "dictionary-items": DictionaryItemsBuilder(api, resolver, culture=config.culture).build,
            "templates": TemplatesBuilder(api, resolver, views_dir=config.views_dir).build,
            "media": MediaBuilder(api, resolver, media_dir=config.media_dir).build,
            "data-types": data_types.build,
            "compositions": CompositionsBuilder(api, resolver).build,
            "element-types": ElementTypesBuilder(api, resolver).build,
            "document-types": DocumentTypesBuilder(api, resolver).build,
            "data-types-document-types": data_types.update_document_types,
            "documents": DocumentsBuilder(api, resolver).build,
            "data-types-documents": data_types.update_documents,
        }
