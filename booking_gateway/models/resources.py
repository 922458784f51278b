"""
Resource Models
Shapes of the backend resources relayed by the gateway.

These are documentation-level types only: payloads flow through unvalidated
and the backend stays the owner of every field.
"""

from typing import NotRequired, TypedDict, Union


class Cliente(TypedDict):
    id: int
    nome: str
    telefone: NotRequired[str]
    email: NotRequired[Union[str, None]]


class Servico(TypedDict):
    id: int
    nome: str
    preco: float
    duracao_min: NotRequired[int]


class NovoAgendamento(TypedDict):
    cliente_id: int
    data_hora: Union[str, int]
    preco: float
    concluido: bool
    servicos_ids: list[int]


class Agendamento(NovoAgendamento):
    id: int


class AgendamentosPage(TypedDict):
    agendamentos: list[Agendamento]
    clientes: list[Cliente]
    servicos: list[Servico]
    errors: dict[str, str]


class ClientesPage(TypedDict):
    clientes: list[Cliente]
    errors: dict[str, str]


class ServicosPage(TypedDict):
    servicos: list[Servico]
    errors: dict[str, str]
