# cli.py - interactive point-of-sale terminal
import sys
from datetime import datetime
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import IntPrompt, Confirm
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.text import Text
from rich import box

from prompt_toolkit import prompt
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.styles import Style as PromptStyle

from sdk.posclient import DEFAULT_BASE_URL, PosClient, cart_total, make_items

console = Console()
c = PosClient(base_url=DEFAULT_BASE_URL)


# Global state for status messages, the product list and the open cart
status_message = "Ready"
product_cache: List[Dict[str, Any]] = []
cart: Dict[int, int] = {}

custom_style = PromptStyle.from_dict({
    'completion-menu.completion': 'bg:#008888 #ffffff',
    'completion-menu.completion.current': 'bg:#00aaaa #000000',
})


# ---------------------------
# Display helpers
# ---------------------------
def show_products(products: List[Dict[str, Any]]):
    if not products:
        console.print("[italic yellow]No products found[/italic yellow]")
        return

    table = Table(
        title="🍔 Menu",
        box=box.ROUNDED,
        header_style="bold cyan",
        title_style="bold magenta",
        show_lines=True
    )
    table.add_column("ID", style="dim", justify="right", width=6)
    table.add_column("Name", style="bold", width=24)
    table.add_column("Price", justify="right", width=10)

    for p in products:
        table.add_row(str(p.get("id", "N/A")), p.get("name", "N/A"), f"${p.get('price', 0):.2f}")
    console.print(table)


def show_cart():
    total = cart_total(product_cache, cart) if cart else 0.0

    title = Text()
    title.append("🛒 Current order", style="bold")
    title.append(f" - Total: ${total:.2f}", style="bold green")

    if not cart:
        console.print(Panel("The order is empty", title=title, style="blue"))
        return

    names = {p["id"]: p for p in product_cache}
    table = Table(box=box.ROUNDED, header_style="bold blue", show_lines=True)
    table.add_column("Product", style="bold", width=24)
    table.add_column("Qty", justify="right", width=6)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Subtotal", justify="right", width=10)

    for pid, qty in cart.items():
        prod = names[pid]
        table.add_row(prod["name"], str(qty), f"${prod['price']:.2f}", f"${prod['price'] * qty:.2f}")

    console.print(Panel(table, title=title, border_style="blue"))


def show_order(order: Dict[str, Any]):
    names = {p["id"]: p["name"] for p in product_cache}
    lines = [
        f"{names.get(it['product_id'], 'Product ' + str(it['product_id']))} x{it['quantity']}"
        for it in order.get("items", [])
    ]
    console.print(Panel.fit(
        "[green]Order submitted![/green]\n"
        + "\n".join(lines)
        + f"\nTotal: [bold]${order.get('total', 0):.2f}[/bold]",
        title="✅ Order Confirmation"
    ))


def show_status(message: str, is_success: bool = True):
    style = "green" if is_success else "red"
    return Panel.fit(f"[{style}]{message}[/{style}]", title="Status")


# ---------------------------
# API wrapper
# ---------------------------
def try_api(fn, *args, success_msg: Optional[str] = None, **kwargs):
    """
    Calls fn(*args, **kwargs) behind a spinner. Returns its result, or None
    if the call failed; failures only update the status line.
    """
    global status_message
    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            transient=True,
        ) as progress:
            progress.add_task(description="Processing...", total=None)
            result = fn(*args, **kwargs)

        if success_msg:
            status_message = success_msg
            console.print(show_status(success_msg, True))
        return result
    except Exception as e:
        status_message = f"Error: {e}"
        console.print(show_status(f"Error: {e}", False))
        return None


# ---------------------------
# Input helpers
# ---------------------------
def get_product_completer():
    return WordCompleter([str(p["id"]) for p in product_cache], ignore_case=True)


def prompt_with_autocomplete(message: str, completer=None, default: str = ""):
    return prompt(f"{message} ", completer=completer, style=custom_style, default=default)


def ask_product_id() -> Optional[int]:
    raw = prompt_with_autocomplete("Enter product ID", completer=get_product_completer()).strip()
    try:
        pid = int(raw)
    except ValueError:
        console.print("[red]Please enter a numeric product ID.[/red]")
        return None
    if pid not in {p["id"] for p in product_cache}:
        console.print(f"[red]No product with ID {pid}.[/red]")
        return None
    return pid


def create_header():
    header = Table(show_header=False, box=box.ROUNDED)
    header.add_column("left", width=30)
    header.add_column("center", width=40)
    header.add_column("right", width=30)

    now = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    header.add_row("🍟 Fast Food POS", f"[bold blue]{c.base_url}[/bold blue]", f"[dim]{now}[/dim]")
    return Panel(header, style="bold blue")


# ---------------------------
# Main menu
# ---------------------------
def menu():
    global status_message, product_cache, cart

    console.clear()
    console.print(create_header())

    product_cache = try_api(c.list_products) or []

    while True:
        if status_message:
            console.print(show_status(status_message, "Error" not in status_message))

        menu_table = Table.grid(padding=(0, 2))
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)
        menu_table.add_column("Key", style="bold cyan", width=4)
        menu_table.add_column("Option", width=30)

        options = [
            ("1", "📦 List products", "4", "🛒 View order"),
            ("2", "➕ Add to order", "5", "✅ Submit order"),
            ("3", "➖ Remove from order", "6", "🔄 Clear order"),
            ("", "", "q", "👋 Quit"),
        ]
        for row in options:
            menu_table.add_row(*row)

        console.print(Panel(menu_table, title="📋 Menu", border_style="yellow"))

        choice = prompt_with_autocomplete(
            "\nChoose an option",
            completer=WordCompleter([str(i) for i in range(1, 7)] + ["q", "quit", "exit"])
        ).strip()

        if choice == "1":
            products = try_api(c.list_products, success_msg="Products loaded")
            if products is not None:
                product_cache = products
                show_products(products)

        elif choice == "2":
            pid = ask_product_id()
            if pid is not None:
                qty = IntPrompt.ask("Quantity", default=1)
                if qty > 0:
                    cart[pid] = cart.get(pid, 0) + qty
                    status_message = f"Added {qty} of product {pid}"
                show_cart()

        elif choice == "3":
            pid = ask_product_id()
            if pid is not None and pid in cart:
                if Confirm.ask("Remove the whole line?"):
                    del cart[pid]
                else:
                    qty = IntPrompt.ask("Quantity to remove", default=1)
                    if qty >= cart[pid]:
                        del cart[pid]
                    elif qty > 0:
                        cart[pid] -= qty
                status_message = f"Updated product {pid}"
            show_cart()

        elif choice == "4":
            show_cart()

        elif choice == "5":
            if not cart:
                console.print("[italic yellow]Nothing to submit[/italic yellow]")
                continue
            total = cart_total(product_cache, cart)
            order = try_api(c.create_order, make_items(cart), total, success_msg="Order submitted")
            if order is not None:
                show_order(order)
                cart = {}

        elif choice == "6":
            if Confirm.ask("[red]Discard the current order?[/red]"):
                cart = {}
                status_message = "Order cleared"

        elif choice.lower() in ("q", "quit", "exit"):
            if Confirm.ask("Are you sure you want to quit?"):
                console.print(Panel.fit("[bold green]Goodbye! 👋[/bold green]", title="Fast Food POS"))
                sys.exit(0)

        console.print()
        console.rule(style="dim")


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == "serve":
        from pos.main import run

        run()
        sys.exit(0)
    if len(sys.argv) > 1:
        c = PosClient(base_url=sys.argv[1])
    try:
        menu()
    except KeyboardInterrupt:
        console.print("\n\n[bold red]Interrupted by user[/bold red]")
        sys.exit(1)
    except Exception as e:
        console.print(f"\n\n[bold red]Unexpected error: {e}[/bold red]")
        sys.exit(1)
