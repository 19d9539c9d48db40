from __future__ import annotations

import argparse
import json
import logging
import os

from dotenv import load_dotenv

from .drm.key_systems import KeySystem
from .drm.session import DrmHandler
from .models import Channel
from .parser.m3u_parser import M3UParser
from .sample_data import SAMPLE_M3U_CONTENT, SAMPLE_PLAYLIST_URL
from .utils.file_utils import ensure_directory
from .utils.http_client import HttpClient

load_dotenv()


def _env_str(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return None
    return value


def _env_int(name: str) -> int | None:
    value = _env_str(name)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _env_bool(name: str) -> bool:
    value = _env_str(name)
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_list(name: str) -> list[str] | None:
    raw = _env_str(name)
    if not raw:
        return None
    items = [item.strip() for item in raw.split(",") if item.strip()]
    return items or None


def _csv_arg(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Parse an IPTV M3U playlist into channel records.")
    parser.add_argument("playlist", nargs="?", default=_env_str("PLAYLIST_PATH"), help="Path to a local .m3u/.m3u8 file")
    parser.add_argument("--base-url", default=_env_str("PLAYLIST_BASE_URL"), help="Base URL for relative stream lines")
    parser.add_argument("--playlist-id", type=int, default=_env_int("PLAYLIST_ID") or 0, help="Playlist id stamped on every channel")
    parser.add_argument("--sample", action="store_true", default=_env_bool("USE_SAMPLE"), help="Parse the built-in demo playlist")
    parser.add_argument(
        "--key-systems",
        type=_csv_arg,
        default=_env_list("SUPPORTED_KEY_SYSTEMS"),
        help="Comma-separated key systems treated as supported (e.g. widevine,clearkey)",
    )
    parser.add_argument(
        "--show-drm",
        action="store_true",
        default=_env_bool("SHOW_DRM"),
        help="Report the DRM session chosen for each protected channel",
    )
    parser.add_argument("--output", default=_env_str("OUTPUT_PATH"), help="Write channels as JSON to this file")
    parser.add_argument("--verbose", action="store_true", default=_env_bool("VERBOSE"), help="Enable debug logging")
    return parser.parse_args(argv)


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def resolve_key_systems(names: list[str] | None) -> list[KeySystem] | None:
    if not names:
        return None
    key_systems = []
    for name in names:
        key_system = KeySystem.from_name(name)
        if key_system is None:
            logging.warning("Ignoring unknown key system %s", name)
            continue
        key_systems.append(key_system)
    return key_systems


def print_channels(channels: list[Channel]) -> None:
    if not channels:
        logging.info("No channels found in playlist.")
        return
    logging.info("%-4s | %-18s | %-12s | %-9s | %s", "#", "Stream", "Group", "DRM", "Name")
    logging.info("%s", "-" * 80)
    for channel in channels:
        drm = channel.drm_config.scheme.value if channel.drm_config else "-"
        logging.info(
            "%-4s | %-18s | %-12s | %-9s | %s",
            channel.sort_order,
            channel.stream_type.value,
            channel.group or "-",
            drm,
            channel.name,
        )


def report_drm_sessions(channels: list[Channel], handler: DrmHandler) -> None:
    for channel in channels:
        if channel.drm_config is None:
            continue
        manager = handler.create_session_manager(channel.drm_config)
        logging.info("[%s] %s -> %r", channel.sort_order, channel.name, manager)


def write_channels(channels: list[Channel], output_path: str) -> None:
    ensure_directory(os.path.dirname(os.path.abspath(output_path)) or ".")
    with open(output_path, "w", encoding="utf-8") as handle:
        json.dump([channel.model_dump(mode="json") for channel in channels], handle, ensure_ascii=False, indent=2)
    logging.info("Saved %s channels to %s", len(channels), output_path)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)

    parser = M3UParser()
    if args.sample:
        entries = parser.parse(SAMPLE_M3U_CONTENT, args.base_url or SAMPLE_PLAYLIST_URL)
    elif args.playlist:
        try:
            entries = parser.parse_file(args.playlist, args.base_url)
        except OSError as exc:
            logging.error("Unable to read playlist %s: %s", args.playlist, exc)
            return 1
    else:
        logging.error("Either a playlist path or --sample must be provided.")
        return 1

    channels = parser.to_channels(entries, args.playlist_id)
    logging.info("Parsed %s channels.", len(channels))

    if args.output:
        try:
            write_channels(channels, args.output)
        except OSError as exc:
            logging.error("Unable to write %s: %s", args.output, exc)
            return 1
    else:
        print_channels(channels)

    if args.show_drm:
        with HttpClient() as http_client:
            handler = DrmHandler(http_client, supported_key_systems=resolve_key_systems(args.key_systems))
            report_drm_sessions(channels, handler)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
