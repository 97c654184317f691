"""Tests for the dialect-agnostic field resolver."""

from __future__ import annotations

import pytest

from normalization.resolvers import (
    FIELD_PATHS,
    as_list,
    first_of,
    is_present,
    outro_parametro,
    parse_flag,
    resolve,
    resolve_field,
    resolve_layers,
    resolve_text,
)


class TestResolve:
    def test_own_field_wins_over_bag(self):
        record = {"mimetype": "text/html", "attributes": {"mimetype": "application/pdf"}}
        assert resolve(record, "mimetype") == "text/html"

    def test_falls_back_to_attributes_bag(self):
        assert resolve({"attributes": {"nome": "Maria"}}, "nome") == "Maria"

    def test_key_priority_before_location(self):
        """An earlier key found in the bag beats a later key on the object."""
        record = {"nomeOrgao": "B", "attributes": {"nome": "A"}}
        assert resolve(record, "nome", "nomeOrgao") == "A"

    def test_blank_string_is_absent(self):
        record = {"nome": "  ", "attributes": {"nome": "Maria"}}
        assert resolve(record, "nome") == "Maria"

    def test_falsy_values_are_present(self):
        assert resolve({"nivelSigilo": 0}, "nivelSigilo") == 0
        assert resolve({"principal": False}, "principal") is False

    @pytest.mark.parametrize("record", [None, "texto", 42, [], {"attributes": None}, {"attributes": "x"}])
    def test_never_raises(self, record):
        assert resolve(record, "nome") is None

    def test_custom_bags(self):
        record = {"dadosBasicos": {"nome": "Dr. X"}}
        assert resolve(record, "nome") is None
        assert resolve(record, "nome", bags=("attributes", "dadosBasicos")) == "Dr. X"


class TestFieldPaths:
    def test_mimetype_in_either_dialect(self):
        assert resolve_field({"attributes": {"mimetype": "application/pdf"}}, "documento.mimetype") == "application/pdf"
        assert resolve_field({"conteudo": {"mimetype": "text/html"}}, "documento.mimetype") == "text/html"

    def test_pessoa_nome_in_either_dialect(self):
        assert resolve_field({"attributes": {"nome": "A"}}, "pessoa.nome") == "A"
        assert resolve_field({"dadosBasicos": {"nome": "B"}}, "pessoa.nome") == "B"
        assert resolve_field({"nome": "C"}, "pessoa.nome") == "C"

    def test_movimento_id_variants(self):
        assert resolve_field({"attributes": {"identificadorMovimento": "1"}}, "movimento.id") == "1"
        assert resolve_field({"idMovimento": "2"}, "movimento.id") == "2"

    def test_every_logical_field_tolerates_empty_record(self):
        for logical_field in FIELD_PATHS:
            assert resolve_field({}, logical_field) is None

    def test_unknown_logical_field(self):
        with pytest.raises(KeyError):
            resolve_field({}, "nao.existe")


class TestHelpers:
    def test_as_list(self):
        assert as_list(None) == []
        assert as_list({"a": 1}) == [{"a": 1}]
        assert as_list([1, None, 2]) == [1, 2]

    def test_first_of(self):
        assert first_of([{"cep": "1"}, {"cep": "2"}]) == {"cep": "1"}
        assert first_of([]) is None
        assert first_of("x") == "x"

    def test_is_present(self):
        assert not is_present(None)
        assert not is_present("")
        assert is_present(0)
        assert is_present([])

    def test_resolve_layers_first_layer_wins(self):
        inner = {"numero": "1"}
        outer = {"numero": "2", "classeProcessual": "7"}
        assert resolve_layers([inner, outer], "numero") == "1"
        assert resolve_layers([inner, outer], "classeProcessual") == "7"
        assert resolve_layers([inner, outer], "nada") is None

    def test_resolve_text(self):
        assert resolve_text({"codigo": 7780}, "codigo") == "7780"
        assert resolve_text({"codigo": {"x": 1}}, "codigo") is None
        assert resolve_text({"codigo": " 12 "}, "codigo") == "12"

    def test_outro_parametro_both_shapes(self):
        mni22 = {"outroParametro": [{"attributes": {"nome": "tamanho", "valor": "10"}}]}
        mni30 = {"outroParametro": {"nome": "tamanho", "valor": 10}}
        assert outro_parametro(mni22, "tamanho") == "10"
        assert outro_parametro(mni30, "tamanho") == 10
        assert outro_parametro(mni30, "rotulo") is None
        assert outro_parametro(None, "tamanho") is None

    @pytest.mark.parametrize(
        "value,expected",
        [(True, True), (False, False), ("true", True), ("TRUE", True), ("S", True),
         ("s", True), ("N", False), ("false", False), (None, False), ("sim", False), (1, False)],
    )
    def test_parse_flag(self, value, expected):
        assert parse_flag(value) is expected
