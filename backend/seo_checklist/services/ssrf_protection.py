"""
SSRF Protection - Refuse to analyze URLs that point at internal hosts.
"""
import ipaddress
import socket
from urllib.parse import urlparse

from seo_checklist.logger import logger


class SSRFProtection:
    """Validates URLs before the analyzer fetches them."""

    # Private/internal IP ranges to block
    BLOCKED_RANGES = [
        ipaddress.ip_network("10.0.0.0/8"),
        ipaddress.ip_network("172.16.0.0/12"),
        ipaddress.ip_network("192.168.0.0/16"),
        ipaddress.ip_network("127.0.0.0/8"),
        ipaddress.ip_network("169.254.0.0/16"),
        ipaddress.ip_network("0.0.0.0/8"),
        ipaddress.ip_network("::1/128"),
        ipaddress.ip_network("fc00::/7"),
        ipaddress.ip_network("fe80::/10"),
    ]

    BLOCKED_HOSTS = {
        "localhost",
        "metadata.google.internal",
    }

    @classmethod
    def is_blocked_address(cls, address: str) -> bool:
        ip = ipaddress.ip_address(address)
        return any(ip in blocked_range for blocked_range in cls.BLOCKED_RANGES)

    @classmethod
    def validate_url(cls, url: str) -> tuple[bool, str]:
        """
        Validate URL for SSRF vulnerabilities.

        Returns:
            tuple: (is_valid, error_message)
        """
        parsed = urlparse(url)

        if parsed.scheme not in ("http", "https"):
            return False, f"Invalid scheme: {parsed.scheme}"

        hostname = parsed.hostname
        if not hostname:
            return False, "Empty hostname"

        if hostname.lower() in cls.BLOCKED_HOSTS:
            return False, f"Blocked hostname: {hostname}"

        # Literal IPs need no resolution
        try:
            if cls.is_blocked_address(hostname):
                return False, f"Blocked address: {hostname}"
            return True, ""
        except ValueError:
            pass

        try:
            infos = socket.getaddrinfo(hostname, None)
        except socket.gaierror:
            # Unresolvable hosts fail later in the fetch itself
            logger.warning(f"DNS resolution failed for {hostname}")
            return True, ""

        for info in infos:
            address = info[4][0].split("%", 1)[0]
            if cls.is_blocked_address(address):
                return False, f"{hostname} resolves to blocked address {address}"

        return True, ""
