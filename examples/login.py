#!/usr/bin/env python3
"""
mangaloom Login Example

Logs in with the credentials from secrets.env, shows the permissions of the
session, refreshes the token pair and logs out again.

Expects MANGALOOM_USERNAME and MANGALOOM_PASSWORD in secrets.env.

Run with: uv run examples/login.py
"""

import asyncio

from dotenv import load_dotenv
from rich.console import Console

from mangaloom import ApiError, ApiSettings, MangaloomClient, configure_logging

console = Console()


async def main():
    """Walk through the credential lifecycle."""
    console.print("[bold blue]mangaloom login example[/bold blue]")

    load_dotenv("secrets.env")
    settings = ApiSettings()
    configure_logging(settings.log_level)

    if not settings.username or not settings.password:
        console.print("[red]Missing MANGALOOM_USERNAME / MANGALOOM_PASSWORD in secrets.env[/red]")
        return

    async with MangaloomClient(settings) as client:
        await client.ping()
        console.print("[green]API is reachable[/green]")

        try:
            await client.login()
        except ApiError as e:
            console.print(f"[red]Login failed: {e}[/red]")
            for error in e.errors:
                console.print(f"  {error.status} {error.title}: {error.detail}")
            return

        check = await client.check_token()
        console.print(f"Authenticated: {check.isAuthenticated}")
        console.print(f"Roles: {', '.join(check.roles) or 'none'}")

        me = await client.user.me()
        console.print(f"Logged in as [cyan]{me.data.attributes.username}[/cyan]")

        refreshed = await client.refresh()
        console.print(f"Token refreshed: {refreshed.message or 'ok'}")

        await client.logout()
        console.print(f"Logged out, stored tokens: {client.tokens}")


if __name__ == "__main__":
    asyncio.run(main())
