"""CLI commands for buying tickets and listing prices."""

from __future__ import annotations

import click

from cinema_tickets.application.dto import TicketSpec
from cinema_tickets.application.purchase_tickets import PurchaseTicketsHandler
from cinema_tickets.application.show_prices import ShowPricesHandler
from cinema_tickets.domain.exceptions import DomainException
from cinema_tickets.domain.model.pricing import MAX_TICKETS_PER_PURCHASE
from cinema_tickets.infrastructure.bootstrap import (
    payment_service,
    seat_reservation_service,
)


def _parse_tickets(raw: str) -> list[TicketSpec]:
    """Parse 'ADULT:2,CHILD:1' into TicketSpec list."""
    specs: list[TicketSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid ticket format '{pair}'. Expected 'TYPE:Quantity'.",
                param_hint="--tickets",
            )
        name, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for ticket type '{name}'.",
                param_hint="--tickets",
            )
        specs.append(TicketSpec(ticket_type=name.strip(), quantity=qty))
    return specs


@click.command("purchase")
@click.option("--account", "account_id", required=True, type=int, help="Account ID.")
@click.option("--tickets", required=True, help="Tickets as 'TYPE:Qty,TYPE:Qty'.")
def purchase(account_id: int, tickets: str) -> None:
    """Buy tickets for an account (charges, then reserves seats)."""
    specs = _parse_tickets(tickets)

    handler = PurchaseTicketsHandler(
        payment_service=payment_service(),
        seat_service=seat_reservation_service(),
    )

    try:
        dto = handler.handle_specs(account_id, specs)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Purchase complete for account #{dto.account_id}")
    click.echo()
    click.echo(f"  {'Adults':<20} {dto.adults:>5}")
    click.echo(f"  {'Children':<20} {dto.children:>5}")
    click.echo(f"  {'Infants':<20} {dto.infants:>5}")
    click.echo(f"  {'-'*26}")
    click.echo(f"  {'Seats reserved':<20} {dto.seats_reserved:>5}")
    click.echo(f"  {'Amount charged':<14} {dto.amount_display:>11}")


@click.command("prices")
def prices() -> None:
    """Show ticket prices."""
    lines = ShowPricesHandler().handle()

    click.echo(f"{'Type':<10} {'Price':>8} {'Seat':>6}")
    click.echo("-" * 26)
    for line in lines:
        seat = "yes" if line.needs_seat else "no"
        click.echo(f"{line.ticket_type:<10} {line.price_display:>8} {seat:>6}")
    click.echo()
    click.echo(f"Maximum {MAX_TICKETS_PER_PURCHASE} tickets per purchase.")
