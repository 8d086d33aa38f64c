"""Parsing of raw command lines and confirmation answers."""

from __future__ import annotations

from addrctl.logic.parser.address_book_parser import AddressBookParser

__all__ = ["AddressBookParser"]
