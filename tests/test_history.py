from despesas.history import MESSAGE_LIMIT, History


def test_add_puts_newest_first():
    history = History()
    history.add("primeira")
    history.add("segunda")
    assert list(history) == ["segunda", "primeira"]
    assert len(history) == 2


def test_add_truncates_long_message():
    history = History()
    history.add("a" * 500)
    (message,) = history
    assert message == "a" * MESSAGE_LIMIT


def test_render_empty():
    assert History().render() == (
        "\n--- HISTÓRICO DE AÇÕES ---\nNenhuma ação registrada.\n"
    )


def test_render_entries():
    history = History()
    history.add("primeira")
    history.add("segunda")
    assert history.render().splitlines() == [
        "",
        "--- HISTÓRICO DE AÇÕES ---",
        "- segunda",
        "- primeira",
        "--------------------------",
    ]