# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Show the common name and SANs of the certificate a domain serves on :443."""

import re
import subprocess
from dataclasses import dataclass, field

from .._util.logging_utils import _log_debug
from .._util.process import Runner, run_tool

HANDSHAKE_TIMEOUT = 15.0

_PEM_RE = re.compile(
    r"-----BEGIN CERTIFICATE-----\s.*?-----END CERTIFICATE-----", re.DOTALL
)
# value runs to the next ", ATTR =" (or legacy "/ATTR=") separator, so escaped commas survive
_CN_RE = re.compile(r"CN\s*=\s*(.+?)(?=,\s*[A-Za-z][\w.]*\s*=|/[A-Za-z][\w.]*=|$)")


@dataclass
class CertificateNames:
    common_name: str | None
    alt_names: list[str] = field(default_factory=list)


class CertificateFetcher:
    """Fetch and decode certificates with the ``openssl`` CLI."""

    def __init__(self, runner: Runner = run_tool, timeout: float = HANDSHAKE_TIMEOUT):
        self._run = runner
        self.timeout = timeout

    def fetch(self, domain: str) -> str | None:
        """Return the first PEM block presented by ``domain:443``, or None."""
        cmd = ["openssl", "s_client", "-connect", f"{domain}:443", "-servername", domain]
        try:
            result = self._run(cmd, capture=True, check=False, input="", timeout=self.timeout)
        except subprocess.TimeoutExpired:
            _log_debug(f"TLS handshake with {domain} timed out")
            return None
        return extract_pem(f"{result.stdout or ''}\n{result.stderr or ''}")

    def describe(self, pem: str) -> str:
        """Return ``openssl x509 -text`` output for *pem*."""
        result = self._run(["openssl", "x509", "-text", "-noout"], capture=True, input=pem)
        return result.stdout


def extract_pem(output: str) -> str | None:
    match = _PEM_RE.search(output)
    return match.group(0) + "\n" if match else None


def parse_common_name(cert_text: str) -> str | None:
    for line in cert_text.splitlines():
        stripped = line.strip()
        if stripped.startswith("Subject:"):
            match = _CN_RE.search(stripped)
            return match.group(1).strip() if match else None
    return None


def parse_alt_names(cert_text: str) -> list[str]:
    lines = cert_text.splitlines()
    for i, line in enumerate(lines):
        if "X509v3 Subject Alternative Name" in line and i + 1 < len(lines):
            names = []
            for entry in lines[i + 1].split(","):
                entry = entry.strip()
                if entry.startswith("DNS:"):
                    entry = entry[len("DNS:"):]
                if entry:
                    names.append(entry)
            return names
    return []


def certificate_names(domain: str, fetcher: CertificateFetcher | None = None) -> CertificateNames:
    if not domain:
        raise SystemExit("Usage: dotkit certnames DOMAIN")

    fetcher = fetcher or CertificateFetcher()
    pem = fetcher.fetch(domain)
    if pem is None:
        raise SystemExit("ERROR: Certificate not found.")

    text = fetcher.describe(pem)
    return CertificateNames(parse_common_name(text), parse_alt_names(text))


def format_certificate_names(names: CertificateNames) -> str:
    lines = ["Common Name:", "", names.common_name or "", "", "Subject Alternative Name(s):", ""]
    lines.extend(names.alt_names)
    return "\n".join(lines)
