# despesas

A small interactive program for tracking personal expenses in the terminal.
Each expense has a description, an amount and a date. When you leave the
program, it saves the list to a binary data file. During a session it also
keeps a history of the actions you took.

## Installation

```
pip install .
```

## Usage

```
despesas [file]
```

`file` is the data file. It defaults to `Controle de Despesas` in the current
directory. The program loads this file at startup. If the file does not
exist, the list starts out empty.

The interface is in Portuguese. The menu offers:

```
1. Adicionar nova despesa      add an expense (description, amount, date)
2. Listar todas as despesas    list every expense, numbered, with the total
3. Remover despesa             remove an expense by its number in the list
4. Ver histórico de ações      show the actions taken in this session
0. Salvar e Sair               save and quit
```

When you add an expense:

- If the description is empty, the program asks for it again.
- If the amount is not a number, the program asks for it again.
- Enter the date as `dd mm aaaa`. The day must be from 1 to 31, the month from
  1 to 12 and the year from 1925 to 2125. If the date falls outside these
  limits, the program asks for it again.

A new expense goes to the top of the list. Expenses are numbered from 1.
Removing an expense that does not exist is recorded as a failed attempt in the
history.

Option `0` writes the list to the data file and ends the program. Reaching the
end of input also saves the list before the program ends. If the file cannot
be written, the program prints an error to standard error. On a terminal, the
screen is cleared before the menu is shown.

## Data file format

The file is a sequence of fixed-size records of 116 bytes each, written in
list order. Each record holds these fields, all little-endian:

- the description, NUL-padded to 100 bytes (UTF-8, at most 99 bytes kept)
- the amount as a 32-bit float
- the day, month and year as 32-bit integers

When the file is loaded, each record is put at the head of the list. The list
therefore comes back in the reverse of the order in which it was saved. An
incomplete record at the end of the file is ignored.

## Using the library

```python
from despesas.expense import Expense, is_valid_date
from despesas.ledger import ExpenseList
from despesas.history import History

expenses = ExpenseList()
expenses.insert(Expense("Mercado", 120.5, 3, 4, 2024))
print(expenses.render())
print(expenses.total(), len(expenses))

removed = expenses.remove(1)       # 1-based; raises IndexError if out of range

expenses.save("dados.bin")
restored = ExpenseList.load("dados.bin")

record = Expense("Luz", 89.9, 10, 5, 2024).to_bytes()
same = Expense.from_bytes(record)  # ValueError if the length is wrong

is_valid_date(31, 12, 2024)        # True

history = History()
history.add("Lista de despesas exibida.")   # messages are cut to 199 characters
print(history.render())
```

`ExpenseList` and `History` can be iterated, newest first.

## Limitations

The action history lives only in memory for the length of a session. It is
not saved to the data file. The date check looks only at the range of each
field, so a date such as 31/02 is accepted.

## Development

```
pip install -e ".[test]"
pytest
```