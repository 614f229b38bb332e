import typer
import httpx
from typing import Any, Dict, Optional
from rich.console import Console
from rich.table import Table

from api.config.settings import get_settings

app = typer.Typer(help="CLI for the metaverse API: accounts, catalog and spaces")
console = Console()

TOKEN_OPTION = typer.Option(
    None, "--token", envvar="METAVERSE_TOKEN", help="Bearer token (from `signin`)"
)


def api_url() -> str:
    """Base URL of the API, from METAVERSE_API_URL."""
    return get_settings().metaverse_api_url.rstrip("/")


def _error_message(response: httpx.Response) -> str:
    try:
        return response.json().get("message", response.text)
    except ValueError:
        return response.text


def request(
    method: str,
    path: str,
    token: Optional[str] = None,
    **kwargs: Any,
) -> Dict[str, Any]:
    """
    Call the API and return the decoded JSON body.

    HTTP and connection errors are printed and end the command with exit
    code 1.
    """
    headers = {"Authorization": f"Bearer {token}"} if token else {}
    try:
        response = httpx.request(
            method,
            f"{api_url()}{path}",
            headers=headers,
            timeout=30.0,
            **kwargs,
        )
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        console.print(
            f"[bold red]HTTP error {e.response.status_code}: {_error_message(e.response)}"
        )
        raise typer.Exit(code=1)
    except httpx.RequestError as e:
        console.print(f"[bold red]Request error: {str(e)}")
        raise typer.Exit(code=1)
    return response.json()


def require_token(token: Optional[str]) -> str:
    if not token:
        console.print("[bold red]Not signed in. Pass --token or set METAVERSE_TOKEN.")
        raise typer.Exit(code=1)
    return token


@app.command()
def signup(
    username: str = typer.Argument(..., help="Username"),
    password: str = typer.Argument(..., help="Password"),
    admin: bool = typer.Option(False, help="Create an Admin account"),
):
    """
    Create an account.
    """
    data = request(
        "POST",
        "/signup",
        json={"username": username, "password": password, "type": "Admin" if admin else "User"},
    )
    console.print(f"[green]User created with ID: [bold]{data['userId']}[/]")


@app.command()
def signin(
    username: str = typer.Argument(..., help="Username"),
    password: str = typer.Argument(..., help="Password"),
):
    """
    Sign in and print the bearer token.
    """
    data = request("POST", "/signin", json={"username": username, "password": password})
    typer.echo(data["token"])


@app.command()
def elements():
    """
    List catalog elements.
    """
    data = request("GET", "/elements")

    table = Table(show_header=True, header_style="bold green")
    table.add_column("ID")
    table.add_column("Size")
    table.add_column("Static")
    table.add_column("Image")

    for element in data["elements"]:
        table.add_row(
            element["id"],
            f"{element['width']}x{element['height']}",
            "yes" if element["static"] else "no",
            element["imageUrl"],
        )

    console.print(table)


@app.command()
def avatars():
    """
    List catalog avatars.
    """
    data = request("GET", "/avatars")

    table = Table(show_header=True, header_style="bold green")
    table.add_column("ID")
    table.add_column("Name")
    table.add_column("Image")

    for avatar in data["avatars"]:
        table.add_row(avatar["id"], avatar["name"], avatar["imageUrl"])

    console.print(table)


@app.command()
def maps():
    """
    List map templates.
    """
    data = request("GET", "/maps")

    if not data["maps"]:
        console.print("[yellow]No maps found.")
        return

    table = Table(show_header=True, header_style="bold green")
    table.add_column("ID")
    table.add_column("Name")
    table.add_column("Dimensions")

    for map_ in data["maps"]:
        table.add_row(map_["id"], map_["name"], map_["dimensions"])

    console.print(table)


@app.command()
def spaces(token: Optional[str] = TOKEN_OPTION):
    """
    List your spaces.
    """
    data = request("GET", "/space/all", token=require_token(token))

    if not data["spaces"]:
        console.print("[yellow]You have no spaces.")
        return

    table = Table(show_header=True, header_style="bold green")
    table.add_column("ID")
    table.add_column("Name")
    table.add_column("Dimensions")

    for space in data["spaces"]:
        table.add_row(space["id"], space["name"], space["dimensions"])

    console.print(table)


@app.command()
def space_create(
    name: str = typer.Argument(..., help="Space name"),
    dimensions: Optional[str] = typer.Option(None, help="Size as WxH, e.g. 100x200"),
    map_id: Optional[str] = typer.Option(None, help="Create the space from this map"),
    token: Optional[str] = TOKEN_OPTION,
):
    """
    Create a space, empty or from a map.
    """
    payload: Dict[str, Any] = {"name": name}
    if dimensions:
        payload["dimensions"] = dimensions
    if map_id:
        payload["mapId"] = map_id

    data = request("POST", "/space", token=require_token(token), json=payload)
    console.print(f"[green]Space created with ID: [bold]{data['spaceId']}[/]")


@app.command()
def space_show(
    space_id: str = typer.Argument(..., help="Space ID"),
    token: Optional[str] = TOKEN_OPTION,
):
    """
    Show a space and the elements placed in it.
    """
    data = request("GET", f"/space/{space_id}", token=require_token(token))

    console.print(f"\n[bold]Space [cyan]{space_id}[/] ({data['dimensions']})")

    table = Table(show_header=True, header_style="bold green")
    table.add_column("Placement")
    table.add_column("Element")
    table.add_column("X")
    table.add_column("Y")

    for placement in data["elements"]:
        table.add_row(
            placement["id"],
            placement["element"]["id"],
            str(placement["x"]),
            str(placement["y"]),
        )

    console.print(table)


@app.command()
def space_delete(
    space_id: str = typer.Argument(..., help="Space ID"),
    token: Optional[str] = TOKEN_OPTION,
):
    """
    Delete one of your spaces.
    """
    data = request("DELETE", f"/space/{space_id}", token=require_token(token))
    console.print(f"[green]{data['message']}")


@app.command()
def element_add(
    space_id: str = typer.Argument(..., help="Space ID"),
    element_id: str = typer.Argument(..., help="Catalog element ID"),
    x: int = typer.Argument(..., help="Column"),
    y: int = typer.Argument(..., help="Row"),
    token: Optional[str] = TOKEN_OPTION,
):
    """
    Place an element in one of your spaces.
    """
    data = request(
        "POST",
        "/space/element",
        token=require_token(token),
        json={"spaceId": space_id, "elementId": element_id, "x": x, "y": y},
    )
    console.print(f"[green]Element placed with ID: [bold]{data['id']}[/]")


@app.command()
def element_remove(
    space_id: str = typer.Argument(..., help="Space ID"),
    element_id: str = typer.Argument(..., help="Catalog element ID"),
    token: Optional[str] = TOKEN_OPTION,
):
    """
    Remove an element from one of your spaces.
    """
    data = request(
        "DELETE",
        "/space/element",
        token=require_token(token),
        json={"spaceId": space_id, "elementId": element_id},
    )
    console.print(f"[green]{data['message']}")


def main():
    app()


if __name__ == "__main__":
    main()
