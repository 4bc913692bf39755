"""Command-line interface for filecrypt."""

from __future__ import annotations

import argparse
import getpass
import logging
from typing import List, Optional, Sequence, Tuple

from colorama import Fore, Style, init as colorama_init

from .config import Config
from .core.container import parse
from .encryption import decrypt_file, encrypt_file
from .file_processor import default_output_path, read_file_bytes
from .utils import (
    AuthenticationFailedError,
    ConfigError,
    FileCryptError,
    MalformedContainerError,
    clean_path,
    format_bytes,
    setup_logging,
)


logger = logging.getLogger(__name__)


def _cli_header() -> str:
    return (
        "\n"
        f"{Fore.CYAN}filecrypt{Style.RESET_ALL}"
        f"{Fore.WHITE} - password-based AES-256-GCM file encryption.{Style.RESET_ALL}\n"
    )


def _command_showcase() -> List[Tuple[str, str, str]]:
    return [
        ("encrypt -i <file> [-o <out>]", "Encrypt a file", "Writes <file>.enc by default."),
        ("decrypt -i <file> [-o <out>]", "Decrypt a file", "Strips .enc by default."),
        ("info -i <file>", "Container details", "Show salt, nonce and sizes."),
        ("help", "Show help", "Usage examples."),
    ]


def _print_command_help(title: str) -> None:
    print(_cli_header())
    print(title)
    print("Usage: filecrypt <command> [options]")
    print("\nAvailable commands:\n")
    for command, label, usecase in _command_showcase():
        print(f"  {command:<30} - {label} ({usecase})")
    print("\nExamples:")
    print("  filecrypt encrypt -i report.pdf")
    print("  filecrypt decrypt -i report.pdf.enc -o restored.pdf")
    print("  FILECRYPT_PASSWORD=... filecrypt encrypt -i notes.txt --force")
    print("")


class _FriendlyArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:
        _print_command_help(f"{Fore.RED}Error:{Style.RESET_ALL} {message}")
        print(f"{Fore.YELLOW}Tip:{Style.RESET_ALL} Run `filecrypt help` for examples.")
        raise SystemExit(2)


def _add_io_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-i", "--input-path", required=True, metavar="FILE", help="Input file")
    parser.add_argument("-o", "--output-path", metavar="FILE", help="Output file")
    parser.add_argument("-p", "--password", help="Password (prompted when omitted)")
    parser.add_argument("--force", action="store_true", help="Overwrite an existing output file")


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace.
    """
    parser = _FriendlyArgumentParser(description="filecrypt CLI")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    encrypt_parser = subparsers.add_parser("encrypt", help="Encrypt a file")
    _add_io_arguments(encrypt_parser)

    decrypt_parser = subparsers.add_parser("decrypt", help="Decrypt a file")
    _add_io_arguments(decrypt_parser)

    info_parser = subparsers.add_parser("info", help="Show container details")
    info_parser.add_argument("-i", "--input-path", required=True, metavar="FILE", help="Encrypted file")

    subparsers.add_parser("help", help="Show help and usage examples")

    return parser.parse_args(argv)


def _resolve_password(args: argparse.Namespace, config: Config, confirm: bool) -> str:
    if args.password:
        return args.password
    if config.password:
        return config.password
    password = getpass.getpass("Password: ")
    if not password:
        raise ConfigError("Password must not be empty.")
    if confirm and getpass.getpass("Confirm password: ") != password:
        raise ConfigError("Passwords do not match.")
    return password


def command_encrypt(args: argparse.Namespace, config: Config) -> None:
    """
    Handle encrypt command.
    """
    input_path = clean_path(args.input_path)
    output_path = (
        clean_path(args.output_path)
        if args.output_path
        else default_output_path(input_path, "encrypt", config.encrypted_suffix)
    )
    password = _resolve_password(args, config, confirm=True)
    print("✓ Deriving key and encrypting...")
    written = encrypt_file(input_path, output_path, password, overwrite=args.force)
    print(f"{Fore.GREEN}✅ Encrypted to: {output_path} ({format_bytes(written)}){Style.RESET_ALL}")


def command_decrypt(args: argparse.Namespace, config: Config) -> None:
    """
    Handle decrypt command.
    """
    input_path = clean_path(args.input_path)
    output_path = (
        clean_path(args.output_path)
        if args.output_path
        else default_output_path(input_path, "decrypt", config.encrypted_suffix)
    )
    password = _resolve_password(args, config, confirm=False)
    print("✓ Deriving key and decrypting...")
    written = decrypt_file(input_path, output_path, password, overwrite=args.force)
    print(f"{Fore.GREEN}✅ Restored to: {output_path} ({format_bytes(written)}){Style.RESET_ALL}")


def command_info(args: argparse.Namespace, _: Config) -> None:
    """
    Handle info command.
    """
    input_path = clean_path(args.input_path)
    details = parse(read_file_bytes(input_path)).to_dict()
    print(f"{Fore.CYAN}Container details{Style.RESET_ALL}")
    print(f"File: {input_path}")
    print(f"Salt: {details['salt']}")
    print(f"Nonce: {details['nonce']}")
    print(f"Payload: {format_bytes(details['payload_size'])}")
    print(f"Plaintext: {format_bytes(details['plaintext_size'])}")


COMMANDS = {
    "encrypt": command_encrypt,
    "decrypt": command_decrypt,
    "info": command_info,
}


def main(argv: Optional[Sequence[str]] = None) -> None:
    """
    CLI entry point.
    """
    colorama_init()
    args = parse_arguments(argv)

    if not args.command:
        _print_command_help("Choose a command to continue.")
        return
    if args.command == "help":
        _print_command_help("filecrypt CLI Help")
        return

    try:
        config = Config.get_instance()
        setup_logging(logging.DEBUG if args.verbose else config.log_level)
        COMMANDS[args.command](args, config)
    except MalformedContainerError as exc:
        logger.debug("Malformed container: %s", exc)
        print(f"{Fore.RED}Error: not a valid encrypted file.{Style.RESET_ALL}")
        raise SystemExit(1)
    except AuthenticationFailedError:
        print(
            f"{Fore.RED}Error: decryption failed. "
            f"Wrong password, or the file is corrupted or was modified.{Style.RESET_ALL}"
        )
        raise SystemExit(1)
    except FileCryptError as exc:
        print(f"{Fore.RED}Error: {exc}{Style.RESET_ALL}")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
