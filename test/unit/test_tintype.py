from tin_validator.tintype import TinType


def test10_constructor():
    """
    Create a descriptor
    """
    t = TinType("CPF", "Cadastro de Pessoas Físicas")
    assert t.code == "CPF"
    assert t.name == "Cadastro de Pessoas Físicas"
    assert t.description is None
    assert str(t) == "<TinType CPF:Cadastro de Pessoas Físicas>"


def test20_eq():
    """
    Descriptors compare by value, also against plain dicts
    """
    t1 = TinType("NIE", "Número de Identidad de Extranjero", "Foreigners")
    t2 = TinType("NIE", "Número de Identidad de Extranjero", "Foreigners")
    t3 = TinType("NIE", "Número de Identidad de Extranjero")
    assert t1 == t2
    assert t1 != t3
    assert hash(t1) == hash(t2)
    assert t1 == {
        "code": "NIE",
        "name": "Número de Identidad de Extranjero",
        "description": "Foreigners",
    }
    assert t3 == {"code": "NIE", "name": "Número de Identidad de Extranjero"}


def test30_to_json():
    t = TinType("UID", "Unternehmens-Identifikationsnummer")
    assert t.to_json() == {"code": "UID", "name": "Unternehmens-Identifikationsnummer"}
