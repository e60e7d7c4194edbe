from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

_PATH_VARIABLE = re.compile(r":([A-Za-z_][A-Za-z0-9_]*)")

CommandExecutor = Callable[[str, str, Optional[Dict[str, Any]]], Any]


@dataclass(frozen=True)
class CommandDescriptor:
    """A named wire command: HTTP method, endpoint template and body parameters."""

    name: str
    method: str
    endpoint: str
    parameters: Tuple[str, ...] = ()
    description: str = ""

    @property
    def path_variables(self) -> Tuple[str, ...]:
        return tuple(_PATH_VARIABLE.findall(self.endpoint))

    def build_request(self, *args: Any, **kwargs: Any) -> Tuple[str, str, Optional[Dict[str, Any]]]:
        """
        Fill path variables, then body parameters, from the call arguments.

        Positional arguments are consumed in order: path variables first,
        then declared body parameters. Keyword arguments may name either.
        """
        names = self.path_variables + self.parameters
        if len(args) > len(names):
            raise TypeError(
                f"{self.name}() takes {len(names)} arguments but {len(args)} were given"
            )
        values: Dict[str, Any] = dict(zip(names, args))
        for key, value in kwargs.items():
            if key not in names:
                raise TypeError(f"{self.name}() got an unexpected argument '{key}'")
            if key in values:
                raise TypeError(f"{self.name}() got multiple values for argument '{key}'")
            values[key] = value

        missing = [variable for variable in self.path_variables if variable not in values]
        if missing:
            raise TypeError(f"{self.name}() missing path arguments: {', '.join(missing)}")

        path = _PATH_VARIABLE.sub(lambda m: str(values[m.group(1)]), self.endpoint)
        body: Optional[Dict[str, Any]] = None
        if self.method in {"POST", "PUT"}:
            body = {param: values[param] for param in self.parameters if param in values}
        return self.method, path, body

    def bind(self, executor: CommandExecutor) -> Callable[..., Any]:
        def command(*args: Any, **kwargs: Any) -> Any:
            method, path, body = self.build_request(*args, **kwargs)
            return executor(method, path, body)

        command.__name__ = self.name
        command.__doc__ = self.description or f"{self.method} {self.endpoint}"
        return command


def build_table(entries: Mapping[str, Tuple[Any, ...]]) -> Dict[str, CommandDescriptor]:
    """Expand ``name -> (method, endpoint[, parameters[, description]])`` rows into descriptors."""
    table: Dict[str, CommandDescriptor] = {}
    for name, row in entries.items():
        method, endpoint = row[0], row[1]
        parameters = tuple(row[2]) if len(row) > 2 else ()
        description = row[3] if len(row) > 3 else ""
        table[name] = CommandDescriptor(
            name=name,
            method=method,
            endpoint=endpoint,
            parameters=parameters,
            description=description,
        )
    return table
