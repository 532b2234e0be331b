"""Interactive menu for managing personal expenses."""

from __future__ import annotations

import argparse
import sys

from despesas.expense import Expense, is_valid_date
from despesas.history import History
from despesas.ledger import ExpenseList

DEFAULT_DATA_FILE = "Controle de Despesas"

_BANNER = "==================================="


def render_menu() -> str:
    """Return the main menu text, ending with the choice prompt."""
    return "\n".join(
        [
            _BANNER,
            "    CONTROLE DE DESPESAS PESSOAIS",
            _BANNER,
            "1. Adicionar nova despesa",
            "2. Listar todas as despesas",
            "3. Remover despesa",
            "4. Ver histórico de ações",
            "0. Salvar e Sair",
            _BANNER,
            "Escolha uma opção: ",
        ]
    )


def _clear_screen() -> None:
    if sys.stdout.isatty():
        print("\033[2J\033[H", end="", flush=True)


def _prompt(text: str) -> str:
    print(text, end="", flush=True)
    return input()


def _parse_int(text: str) -> int | None:
    try:
        return int(text.strip())
    except ValueError:
        return None


def _read_expense() -> Expense:
    description = ""
    while not description:
        description = _prompt("Digite o nome da despesa: ").strip()

    while True:
        try:
            value = float(_prompt("Digite o valor (ex.: 19.99): ").strip())
            break
        except ValueError:
            continue

    while True:
        parts = _prompt("Digite a data (dd mm aaaa): ").split()
        numbers = [_parse_int(part) for part in parts[:3]]
        if len(numbers) == 3 and None not in numbers and is_valid_date(*numbers):
            day, month, year = numbers
            return Expense(description, value, day, month, year)
        print("Data inválida. Insira novamente. ")


def _add_expense(expenses: ExpenseList, history: History) -> None:
    expense = _read_expense()
    expenses.insert(expense)
    history.add(f"Despesa '{expense.description}' (R${expense.value:.2f}) criada.")
    print("\nDespesa adicionada com sucesso.")


def _list_expenses(expenses: ExpenseList, history: History) -> None:
    print(expenses.render(), end="")
    history.add("Lista de despesas exibida.")


def _remove_expense(expenses: ExpenseList, history: History) -> None:
    print(expenses.render(), end="")
    position = _parse_int(
        _prompt("\nDigite o número (#) da despesa que deseja remover: ")
    )
    try:
        expenses.remove(position if position is not None else 0)
    except IndexError:
        history.add("Tentativa de remoção de despesa inválida.")
        print("\nFalha ao remover. Posição inválida ou lista vazia.")
        return
    history.add(f"Despesa na posição #{position} foi removida.")
    print("\nDespesa removida com sucesso.")


def _save_and_close(expenses: ExpenseList, history: History, path: str) -> None:
    try:
        expenses.save(path)
    except OSError as exc:
        print(f"Erro ao salvar '{path}': {exc}", file=sys.stderr)
    history.add("Dados salvos e sessão encerrada.")


def _run(expenses: ExpenseList, history: History, path: str) -> None:
    actions = {
        1: _add_expense,
        2: _list_expenses,
        3: _remove_expense,
        4: lambda _expenses, hist: print(hist.render(), end=""),
    }
    while True:
        _clear_screen()
        try:
            option = _parse_int(_prompt(render_menu()))
        except EOFError:
            option = 0

        if option == 0:
            _save_and_close(expenses, history, path)
            return

        action = actions.get(option)
        if action is None:
            print("\nOpção inválida! Tente novamente.")
        else:
            action(expenses, history)

        _prompt("\nPressione a tecla enter para voltar ao menu.")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive expense manager."""
    parser = argparse.ArgumentParser(
        prog="despesas", description="Controle de despesas pessoais."
    )
    parser.add_argument(
        "file",
        nargs="?",
        default=DEFAULT_DATA_FILE,
        help="arquivo de dados (padrão: %(default)s)",
    )
    args = parser.parse_args(argv)

    expenses = ExpenseList.load(args.file)
    history = History()
    history.add("Sessão iniciada e despesas carregadas do arquivo.")

    try:
        _run(expenses, history, args.file)
    except EOFError:
        _save_and_close(expenses, history, args.file)

    print("\nPrograma finalizado.")
    return 0


if __name__ == "__main__":
    sys.exit(main())