"""Example probe: resolve a hostname against a local DNS server.

Installed as the `check-engine-dns-probe` executable. Copy or symlink it into
a probe directory; the runner treats it like any other probe.
"""

import sys

import click
import dns.exception
import dns.resolver

DEFAULT_HOSTNAME = "www.google.com."
DEFAULT_SERVER = "127.0.0.1"
DEFAULT_PORT = 53
DEFAULT_TIMEOUT = 3.0


def build_resolver(server: str, port: int, timeout: float) -> dns.resolver.Resolver:
    """Resolver bound to a single nameserver, one attempt within timeout."""
    resolver = dns.resolver.Resolver(configure=False)
    # port must be set first, nameservers capture it on assignment
    resolver.port = port
    resolver.nameservers = [server]
    resolver.timeout = timeout
    # lifetime == timeout leaves room for exactly one attempt
    resolver.lifetime = timeout
    resolver.retry_servfail = False
    return resolver


def check_dns(
    hostname: str = DEFAULT_HOSTNAME,
    server: str = DEFAULT_SERVER,
    port: int = DEFAULT_PORT,
    timeout: float = DEFAULT_TIMEOUT,
) -> None:
    """Resolve hostname to its IPv4/IPv6 addresses.

    Raises:
        dns.exception.DNSException: If resolution fails
    """
    resolver = build_resolver(server, port, timeout)
    resolver.resolve_name(hostname)


@click.command()
@click.option("--hostname", default=DEFAULT_HOSTNAME, show_default=True, help="Name to resolve")
@click.option("--server", default=DEFAULT_SERVER, show_default=True, help="DNS server address")
@click.option("--port", default=DEFAULT_PORT, show_default=True, type=int, help="DNS server port")
@click.option("--timeout", default=DEFAULT_TIMEOUT, show_default=True, type=float, help="Timeout in seconds")
def main(hostname, server, port, timeout):
    """Exit 0 if HOSTNAME resolves via SERVER, 1 otherwise."""
    try:
        check_dns(hostname, server, port, timeout)
    except dns.exception.DNSException as e:
        click.echo(f"Error: {e}")
        click.echo(f"DNS Server: {e}", err=True)
        sys.exit(1)

    click.echo("Success")


if __name__ == "__main__":
    main()
