# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

import subprocess
import unittest

from dotkit.lib.tools.certs import (
    CertificateFetcher,
    CertificateNames,
    certificate_names,
    extract_pem,
    format_certificate_names,
    parse_alt_names,
    parse_common_name,
)
from test_utils import FakeRunner, dotkit_env

PEM = "-----BEGIN CERTIFICATE-----\nMIIBszCCAVmgAwIBAgIU\n-----END CERTIFICATE-----"

S_CLIENT_OUTPUT = f"""CONNECTED(00000003)
depth=0 CN = example.org
---
Certificate chain
 0 s:CN = example.org
---
Server certificate
{PEM}
subject=CN = example.org
---
"""

X509_TEXT = """Certificate:
    Data:
        Subject: C = US, O = Example Inc, CN = www.example.org
        X509v3 extensions:
            X509v3 Subject Alternative Name:
                DNS:www.example.org, DNS:example.org, DNS:example.net
            X509v3 Key Usage: critical
"""


class FakeFetcher:
    def __init__(self, pem: str | None, text: str = X509_TEXT) -> None:
        self.pem = pem
        self.text = text
        self.described: list[str] = []

    def fetch(self, domain: str) -> str | None:
        return self.pem

    def describe(self, pem: str) -> str:
        self.described.append(pem)
        return self.text


class ParseTests(unittest.TestCase):
    def test_extract_pem_finds_block(self) -> None:
        self.assertEqual(extract_pem(S_CLIENT_OUTPUT), PEM + "\n")

    def test_extract_pem_without_block(self) -> None:
        self.assertIsNone(extract_pem("connect: Connection refused\nconnect:errno=111"))

    def test_common_name(self) -> None:
        self.assertEqual(parse_common_name(X509_TEXT), "www.example.org")

    def test_common_name_legacy_slash_format(self) -> None:
        text = "        Subject: C=US, O=Example, CN=legacy.example.org/emailAddress=a@b.c\n"
        self.assertEqual(parse_common_name(text), "legacy.example.org")

    def test_common_name_keeps_escaped_comma(self) -> None:
        text = "        Subject: C = US, O = Example, CN = Example\\, Inc. Root\n"
        self.assertEqual(parse_common_name(text), "Example\\, Inc. Root")

    def test_common_name_before_other_attributes(self) -> None:
        text = "        Subject: CN = a.example, O = Example, C = US\n"
        self.assertEqual(parse_common_name(text), "a.example")

    def test_common_name_missing(self) -> None:
        self.assertIsNone(parse_common_name("        Subject: O = No CN Here\n"))

    def test_alt_names(self) -> None:
        self.assertEqual(
            parse_alt_names(X509_TEXT), ["www.example.org", "example.org", "example.net"]
        )

    def test_alt_names_missing(self) -> None:
        self.assertEqual(parse_alt_names("Certificate:\n"), [])


class CertificateNamesTests(unittest.TestCase):
    def test_reports_names(self) -> None:
        fetcher = FakeFetcher(PEM)
        names = certificate_names("example.org", fetcher=fetcher)
        self.assertEqual(names.common_name, "www.example.org")
        self.assertEqual(names.alt_names, ["www.example.org", "example.org", "example.net"])
        self.assertEqual(fetcher.described, [PEM])

    def test_no_certificate_is_error(self) -> None:
        fetcher = FakeFetcher(None)
        with self.assertRaises(SystemExit) as ctx:
            certificate_names("nowhere.invalid", fetcher=fetcher)
        self.assertEqual(str(ctx.exception), "ERROR: Certificate not found.")
        self.assertEqual(fetcher.described, [])

    def test_missing_domain_is_usage_error(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            certificate_names("", fetcher=FakeFetcher(PEM))
        self.assertIn("Usage:", str(ctx.exception))

    def test_format(self) -> None:
        out = format_certificate_names(CertificateNames("a.example", ["a.example", "b.example"]))
        self.assertEqual(
            out.splitlines(),
            ["Common Name:", "", "a.example", "", "Subject Alternative Name(s):", "", "a.example", "b.example"],
        )


class CertificateFetcherTests(unittest.TestCase):
    def test_fetch_uses_domain_as_sni(self) -> None:
        with dotkit_env():
            runner = FakeRunner({("openssl", "s_client"): (0, S_CLIENT_OUTPUT)})
            pem = CertificateFetcher(runner=runner).fetch("example.org")

        self.assertEqual(pem, PEM + "\n")
        self.assertEqual(
            runner.calls,
            [["openssl", "s_client", "-connect", "example.org:443", "-servername", "example.org"]],
        )
        self.assertEqual(runner.kwargs[0]["input"], "")
        self.assertFalse(runner.kwargs[0]["check"])

    def test_unreachable_endpoint_yields_none(self) -> None:
        with dotkit_env():
            runner = FakeRunner({("openssl", "s_client"): (1, "connect:errno=111\n")})
            self.assertIsNone(CertificateFetcher(runner=runner).fetch("nowhere.invalid"))

    def test_timeout_yields_none(self) -> None:
        def hang(cmd):
            raise subprocess.TimeoutExpired(cmd, 15)

        with dotkit_env():
            runner = FakeRunner({("openssl", "s_client"): hang})
            self.assertIsNone(CertificateFetcher(runner=runner).fetch("slow.example"))

    def test_unreachable_domain_ends_in_certificate_not_found(self) -> None:
        with dotkit_env():
            runner = FakeRunner({("openssl", "s_client"): (1, "")})
            with self.assertRaises(SystemExit) as ctx:
                certificate_names("nowhere.invalid", fetcher=CertificateFetcher(runner=runner))
        self.assertEqual(str(ctx.exception), "ERROR: Certificate not found.")
        self.assertEqual(len(runner.calls), 1)
