"""Demonstrates lazy values, overrides with super() and its()."""

from dataclasses import dataclass, field

from rich.console import Console

import lazylet


@dataclass
class Account:
    owner: str = "nobody"
    balance: int = 0
    history: list[int] = field(default_factory=list)


accounts = lazylet.Group("Account", described=Account)


@accounts.let
def deposit():
    return 100


@accounts.subject(name="account")
def make_account(example):
    return Account(owner="ada", balance=example.deposit)


@accounts.example("starts with the deposit")
def starts_with_deposit(example):
    assert example.account.balance == 100
    assert example.account is example.subject


large = accounts.describe("with a large deposit")


@large.let
def deposit(example):
    return example.super() * 10


@large.example("uses the overridden deposit")
def large_deposit(example):
    assert example.account.balance == 1000


owner = accounts.its("owner")


@owner.example
def is_the_account_holder(example):
    assert example.subject == "ada"


if __name__ == "__main__":
    result = lazylet.run([accounts], reporters=[lazylet.ConsoleReporter(Console())])
    raise SystemExit(0 if result.ok else 1)
