"""
EcoTravel - CLI Entry Point.

Usage:
    ecotravel prices --category senior    Show discounted service prices
    ecotravel coupons                      List reward coupons
    ecotravel claim 1                      Claim a coupon
    ecotravel onboard                      Walk through onboarding
    ecotravel health                       Check configuration
"""

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ecotravel.models import UserCategory

app = typer.Typer(
    name="ecotravel",
    help="EcoTravel - Loyalty and pricing engine for smart mobility.",
    add_completion=False,
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    from ecotravel.config import get_settings
    from ecotravel.logging_setup import setup_logging

    setup_logging(get_settings().log_level, verbose=verbose)


@app.command()
def prices(
    category: Optional[UserCategory] = typer.Option(None, "--category", "-c", help="Rider category"),
) -> None:
    """Show government services priced for a rider category."""
    from ecotravel.catalog import SERVICES
    from ecotravel.config import get_settings
    from ecotravel.pricing import benefits_for, discount_percent, format_price, quote

    settings = get_settings()
    category = category or settings.default_category
    symbol = settings.currency_symbol

    table = Table(title=f"Government Services ({category.value})")
    table.add_column("Service")
    table.add_column("Where")
    table.add_column("Price", justify="right")
    table.add_column("Class")

    for item in SERVICES:
        q = quote(item, category)
        price = format_price(q.final_price, symbol)
        if q.show_original:
            price = f"[strike dim]{format_price(q.original_price, symbol)}[/strike dim] {price}"
        table.add_row(item.name, item.place_label, price, item.category_label)

    console.print(table)
    console.print(f"Discount: {discount_percent(category)}% OFF")
    for benefit in benefits_for(category):
        console.print(f"  • {benefit}")


def _seed_ledger(points: Optional[int], calories: Optional[int]):
    from ecotravel.catalog import ACTIVITY, COUPONS
    from ecotravel.config import get_settings
    from ecotravel.rewards import RewardLedger, seed_account

    settings = get_settings()
    if calories is None:
        calories = settings.calories_burned
    if calories is None:
        calories = ACTIVITY.calories
    account = seed_account(
        COUPONS,
        points=settings.starting_points if points is None else points,
        calories=calories,
    )
    return RewardLedger(account)


@app.command()
def coupons(
    calories: Optional[int] = typer.Option(None, "--calories", help="Override calories burned"),
) -> None:
    """List reward coupons and whether they can be claimed."""
    from ecotravel.catalog import COUPONS
    from ecotravel.rewards import claim_button_label

    ledger = _seed_ledger(None, calories)
    account = ledger.account

    table = Table(title="Rewards")
    table.add_column("ID", justify="right")
    table.add_column("Coupon")
    table.add_column("Calories", justify="right")
    table.add_column("Expires")
    table.add_column("Status")
    for coupon in COUPONS:
        table.add_row(
            str(coupon.coupon_id),
            coupon.title,
            f"{coupon.calorie_cost} cal",
            coupon.expires,
            claim_button_label(coupon, account),
        )

    console.print(table)
    console.print(f"Points: {account.points}  Calories: {account.calories}")


@app.command()
def claim(
    coupon_id: int = typer.Argument(..., help="Coupon to claim"),
    calories: Optional[int] = typer.Option(None, "--calories", help="Override calories burned"),
    points: Optional[int] = typer.Option(None, "--points", help="Override starting points"),
) -> None:
    """Claim a reward coupon against the demo account."""
    from ecotravel.catalog import get_coupon
    from ecotravel.errors import ClaimError, InsufficientCaloriesError

    try:
        coupon = get_coupon(coupon_id)
    except KeyError:
        console.print(f"[red]No coupon with id {coupon_id}[/red]")
        raise typer.Exit(1)

    ledger = _seed_ledger(points, calories)
    try:
        receipt = ledger.claim(coupon)
    except InsufficientCaloriesError as e:
        console.print(f"[yellow]Not enough calories![/yellow] {e.message}")
        console.print(f"Need {e.shortfall} more calories.")
        raise typer.Exit(1)
    except ClaimError as e:
        console.print(f"[yellow]{e.message}[/yellow]")
        raise typer.Exit(1)

    console.print(f"[green]Coupon Claimed![/green] {receipt.message}")
    console.print(f"Points: {receipt.account.points}")


@app.command()
def onboard() -> None:
    """Walk through the onboarding pages."""
    from ecotravel.errors import ConsentRequiredError
    from onboarding import CONSENT_TEXT, OnboardingFlow

    flow = OnboardingFlow()
    state = flow.start()

    while not state.completed:
        page = flow.current_page(state)
        dots = " ".join("●" if active else "○" for active in flow.progress(state))
        body = f"{page.description}\n\n[dim]{dots}[/dim]"
        if page.is_last:
            mark = "x" if state.consent else " "
            body += "\n\n" + escape(f"[{mark}] {CONSENT_TEXT}")
        console.print(Panel.fit(body, title=page.title, border_style="blue"))

        prompt = escape(f"[{page.button_text}]") + " (c)ontinue, (b)ack"
        if page.is_last:
            prompt += ", (a)gree"
        choice = console.input(f"{prompt}, (q)uit: ").strip().lower()

        if choice in ("q", "quit", "exit"):
            console.print("[dim]Onboarding cancelled.[/dim]")
            raise typer.Exit(1)
        elif choice == "b":
            state = flow.go_back(state)
        elif choice == "a":
            state = flow.set_consent(state, not state.consent)
        elif choice in ("", "c"):
            try:
                state = flow.advance(state)
            except ConsentRequiredError as e:
                console.print(f"[yellow]{e.message}[/yellow]")

    console.print("[green]Welcome aboard![/green]")


@app.command()
def health() -> None:
    """Check configuration."""
    from ecotravel import __version__
    from ecotravel.config import get_settings

    console.print(f"\n[bold]EcoTravel {__version__} Health Check[/bold]\n")

    try:
        settings = get_settings()
    except ValueError as e:
        console.print(f"\n[red]❌ Configuration error: {e}[/red]")
        raise typer.Exit(1)

    console.print("✅ Configuration loaded")
    console.print(f"   Environment: {settings.env}")
    console.print(f"   Log level: {settings.log_level}")
    console.print(f"   Default category: {settings.default_category.value}")


if __name__ == "__main__":
    app()
