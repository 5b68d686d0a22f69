"""Command-line interface for layoutsync."""

from __future__ import annotations

import logging as logging

from layoutsync import bidirectional_sync as bidirectional_sync
from layoutsync import convert_desktop_content_to_mobile as convert_desktop_content_to_mobile
from layoutsync import has_structural_changes as has_structural_changes
from layoutsync import load_config as load_config
from layoutsync import parse_tree as parse_tree
from layoutsync import set_cross_platform_sync as set_cross_platform_sync
from layoutsync.cli.app import main as main
from layoutsync.cli.commands import check as check_command
from layoutsync.cli.commands import classify as classify_command
from layoutsync.cli.commands import convert as convert_command
from layoutsync.cli.commands import sync as sync_command
from layoutsync.cli.commands import toggle as toggle_command
from layoutsync.cli.parser import _package_version as _package_version
from layoutsync.cli.parser import build_parser as build_parser

_format_summary = sync_command.format_sync_summary

_run_sync = sync_command.run_sync
_run_check = check_command.run_check
_run_classify = classify_command.run_classify
_run_convert = convert_command.run_convert
_run_toggle = toggle_command.run_toggle
