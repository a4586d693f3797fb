"""Inspection of gRPC ``.proto`` definitions supplied for gRPC data sources."""
from __future__ import annotations

from typing import Dict, List

from proto_schema_parser import ast
from proto_schema_parser.parser import Parser


def get_service_and_rpc_names(proto_definition: str) -> Dict[str, List[str]]:
    """Map each service declared in ``proto_definition`` to its RPC method names.

    Methods keep their declaration order. A definition without services
    yields an empty dict.
    """

    proto_file = Parser().parse(proto_definition)
    services: Dict[str, List[str]] = {}
    for element in proto_file.file_elements:
        if isinstance(element, ast.Service):
            services[element.name] = [
                method.name for method in element.elements if isinstance(method, ast.Method)
            ]
    return services
