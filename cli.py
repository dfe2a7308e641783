# cli.py – `flask init-db`, `flask list-users`
import click
from flask.cli import with_appcontext
from models import User
from database import init_db


@click.command('init-db')
@with_appcontext
def init_db_command():
    """Táblák, nézet és admin fiók létrehozása (többször is futtatható)."""
    if init_db():
        click.echo("Adatbázis kész, admin fiók létrehozva.")
    else:
        click.echo("Adatbázis kész, admin fiók már létezett.")


@click.command('list-users')
@with_appcontext
def list_users_command():
    users = User.query.order_by(User.id).all()
    if not users:
        click.echo("Nincsenek felhasználók az adatbázisban.")
        return
    click.echo("---- Users in Database ----")
    for u in users:
        click.echo(f"ID: {u.id}, Email: {u.email}, Role: {u.role.value}")


def init_app(app):
    app.cli.add_command(init_db_command)
    app.cli.add_command(list_users_command)
