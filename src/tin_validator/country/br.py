"""
Brazilian CPF (Cadastro de Pessoas Físicas) and CNPJ (Cadastro Nacional da
Pessoa Jurídica)
"""

from typing import Optional

from stdnum.br import cnpj, cpf

from tin_validator.tintype import TinType
from tin_validator.helper import BaseTinHandler
from tin_validator.helper.base import group
from tin_validator.helper.checksum import all_same
from tin_validator.helper.normalizer import normalize, digits_only


class Brazil(BaseTinHandler):
    COUNTRYCODE = "BR"
    LENGTH = (11, 14)
    PATTERN = (
        r"^(\d{3}\.?\d{3}\.?\d{3}-?\d{2}|\d{2}\.?\d{3}\.?\d{3}/?\d{4}-?\d{2})$"
    )
    MASK = "999.999.999-99"
    PLACEHOLDER = "123.456.789-09"
    TIN_TYPES = (
        TinType(
            "CPF",
            "Cadastro de Pessoas Físicas",
            "Individual taxpayer registry identification",
        ),
        TinType(
            "CNPJ",
            "Cadastro Nacional da Pessoa Jurídica",
            "Business taxpayer registry identification",
        ),
    )

    def has_valid_length(self, tin: str) -> bool:
        return len(digits_only(tin)) in self.LENGTH

    def has_valid_rule(self, tin: str) -> bool:
        number = digits_only(tin)
        if all_same(number):
            return False
        if len(number) == 11:
            return cpf.is_valid(number)
        return cnpj.is_valid(number)

    def identify_tin_type(self, tin: str) -> Optional[TinType]:
        number = digits_only(normalize(tin))
        if all_same(number):
            return None
        types = self.get_tin_types()
        if len(number) == 11 and cpf.is_valid(number):
            return types[1]
        if len(number) == 14 and cnpj.is_valid(number):
            return types[2]
        return None

    def format_input(self, value: str) -> str:
        number = digits_only(value)
        if len(number) <= 11:
            return group(number, (3, 3, 3, 2), "..-")
        return group(number, (2, 3, 3, 4, 2), "../-")


TIN_HANDLERS = [Brazil]
