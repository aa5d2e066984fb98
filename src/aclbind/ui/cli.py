# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from aclbind.app import update_binding_rule
from aclbind.config import ConfigurationError, configure_logging
from aclbind.domain.model import RoleBindType, RuleField
from aclbind.domain.rule_updates import (
    BindingRuleUpdateError,
    FieldPresence,
    MissingRequiredFieldError,
    RuleUpdateInput,
    RuleUpdateRequest,
)
from aclbind.ui.output import format_binding_rule

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)

UPDATE_EPILOG = """\
By default the given fields are merged into the rule's current state, so only the
fields to change need to be passed. --no-merge overwrites every editable field
instead, leaving out a field resets it.

example:
  aclbind binding-rule update \\
      --id=43cb72df-9c6f-4315-ac8a-01a9d98155ef \\
      --description="new description" \\
      --role-bind-type=existing \\
      --role-name="k8s-{{serviceaccount.name}}" \\
      --selector='serviceaccount.namespace==default and serviceaccount.name==web'
"""


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Manage ACL binding rules")
    parser.add_argument(
        "--http-addr",
        type=str,
        help="Address of the Consul HTTP API (defaults to CONSUL_HTTP_ADDR)",
    )
    parser.add_argument(
        "--token",
        type=str,
        help="ACL token used for the requests (defaults to CONSUL_HTTP_TOKEN)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log each step of the update",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    binding_rule = subparsers.add_parser("binding-rule", help="Binding rule commands")
    binding_rule_sub = binding_rule.add_subparsers(dest="binding_rule_command", required=True)
    update = binding_rule_sub.add_parser(
        "update",
        help="Update an ACL binding rule",
        epilog=UPDATE_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    update.add_argument(
        "--id",
        dest="rule_id",
        type=str,
        help=(
            "The ID of the binding rule to update. It may be specified as a unique ID "
            "prefix but will error if the prefix matches multiple binding rule IDs"
        ),
    )
    # Editable fields default to None so that explicitly passed values, even empty
    # ones, can be told apart from omitted flags.
    update.add_argument(
        "--description",
        type=str,
        default=None,
        help="A description of the binding rule",
    )
    update.add_argument(
        "--selector",
        type=str,
        default=None,
        help=(
            "Selector is an expression that matches against verified identity "
            "attributes returned from the identity provider during login"
        ),
    )
    update.add_argument(
        "--role-bind-type",
        type=str,
        default=None,
        help=(
            'Type of role binding to perform ("service" or "existing") '
            f"(default: {RoleBindType.SERVICE})"
        ),
    )
    update.add_argument(
        "--role-name",
        type=str,
        default=None,
        help="Name of role to bind on match. Can use {{var}} interpolation",
    )
    update.add_argument(
        "--no-merge",
        action="store_true",
        help=(
            "Do not merge the current binding rule information with what is provided "
            "to the command. Instead overwrite all fields with the exception of the "
            "binding rule ID which is immutable"
        ),
    )
    update.add_argument(
        "--meta",
        dest="show_meta",
        action="store_true",
        help="Show binding rule metadata such as the content hash and raft indices",
    )

    return parser.parse_args(list(argv))


def _build_request(args: argparse.Namespace) -> RuleUpdateRequest:
    presence = FieldPresence.of(
        rule_field for rule_field in RuleField if getattr(args, rule_field.value) is not None
    )
    update = RuleUpdateInput(
        description=args.description or "",
        selector=args.selector or "",
        role_bind_type=(
            args.role_bind_type if args.role_bind_type is not None else RoleBindType.SERVICE
        ),
        role_name=args.role_name or "",
    )
    return RuleUpdateRequest(
        rule_id=args.rule_id or "",
        input=update,
        presence=presence,
        no_merge=args.no_merge,
        show_meta=args.show_meta,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    request = _build_request(parsed_args)
    try:
        rule = update_binding_rule(
            request,
            address=parsed_args.http_addr,
            token=parsed_args.token,
        )
    except MissingRequiredFieldError as exc:
        log.error("%s", exc)
        log.error("Missing required '--role-name' flag, it is mandatory with --no-merge")
        sys.exit(1)
    except (BindingRuleUpdateError, ConfigurationError) as exc:
        log.error("%s", exc)
        sys.exit(1)
    except Exception:
        log.exception("Fatal error during binding rule update")
        sys.exit(1)

    print(format_binding_rule(rule, show_meta=request.show_meta))


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(1)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
