import io

import pytest

from algokit.t9search import MAX_LINE, Contact, main, read_contacts, search, to_digits


def test_to_digits_is_case_insensitive():
    assert to_digits("petr") == to_digits("PETR")


def test_to_digits_keeps_digits():
    assert to_digits("603123456") == "603123456"


def test_to_digits_plus_becomes_zero():
    assert to_digits("+420") == "0" + "420"


def test_to_digits_other_characters_become_spaces():
    text = ", -"
    assert to_digits(text) == " " * len(text)


def test_letters_on_one_key_share_a_digit():
    assert all(to_digits(c) == to_digits("a") for c in "bcABC")
    assert to_digits("a") != to_digits("d")


def test_to_digits_keypad_layout():
    assert to_digits("adgjmptw") == "23456789"


def test_contact_string_form():
    assert str(Contact("Petr Dvorak", "603123456")) == "Petr Dvorak, 603123456"


def test_read_contacts_pairs_lines_and_skips_blanks():
    stream = io.StringIO("Petr Dvorak\r\n603123456\r\n\n   \nJana Novotna\n777987654\n")
    contacts = list(read_contacts(stream))
    assert contacts == [
        Contact("Petr Dvorak", "603123456"),
        Contact("Jana Novotna", "777987654"),
    ]


def test_read_contacts_truncates_long_lines():
    stream = io.StringIO("x" * (MAX_LINE + 50) + "\n" + "1" * (MAX_LINE + 5) + "\n")
    (contact,) = read_contacts(stream)
    assert len(contact.name) == MAX_LINE
    assert len(contact.number) == MAX_LINE


def test_read_contacts_missing_number():
    contacts = list(read_contacts(io.StringIO("Alone\n")))
    assert contacts == [Contact("Alone", "")]


@pytest.fixture
def book():
    return [
        Contact("Petr Dvorak", "603123456"),
        Contact("Jana Novotna", "777987654"),
        Contact("Bedrich Smetana ml.", "541141120"),
    ]


def test_search_by_name(book):
    query = to_digits("dvor")
    assert list(search(book, query)) == [book[0]]


def test_search_by_number(book):
    assert list(search(book, "987")) == [book[1]]


def test_search_empty_query_matches_all(book):
    assert list(search(book, "")) == book


def test_main_without_query_prints_everything(monkeypatch, capsys, book):
    text = "".join(f"{c.name}\n{c.number}\n" for c in book)
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == [str(c) for c in book]


def test_main_with_query_prints_matches(monkeypatch, capsys, book):
    text = "".join(f"{c.name}\n{c.number}\n" for c in book)
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([to_digits("Smet")]) == 0
    assert capsys.readouterr().out.splitlines() == [str(book[2])]


def test_main_not_found(monkeypatch, capsys, book):
    text = "".join(f"{c.name}\n{c.number}\n" for c in book)
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main(["000000"]) == 0
    assert capsys.readouterr().out.splitlines() == ["Not found"]


def test_main_rejects_non_digit_query(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["12a"]) == 1
    assert "Enter only numbers in the argument!" in capsys.readouterr().err


def test_main_rejects_two_arguments(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["1", "2"]) == 1
    assert "Enter only 1 argument!" in capsys.readouterr().err