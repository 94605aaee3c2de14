from __future__ import annotations

import yaml

from configset.loaders.base import Source


class _StringKeyLoader(yaml.SafeLoader):
    # Keys become text as each pair is inserted, so 1 and true stay distinct siblings.
    def construct_mapping(self, node: yaml.MappingNode, deep: bool = False) -> dict[str, object]:
        if not isinstance(node, yaml.MappingNode):
            raise yaml.constructor.ConstructorError(
                None, None, f"expected a mapping node, but found {node.id}", node.start_mark
            )
        self.flatten_mapping(node)
        mapping: dict[str, object] = {}
        for key_node, value_node in node.value:
            key = self.construct_object(key_node, deep=deep)
            mapping[_key_text(key)] = self.construct_object(value_node, deep=deep)
        return mapping


class YamlSource(Source):
    # Every non-empty document in a stream becomes its own value, merged in order.
    format_name = "YAML"

    def _parse(self, text: str) -> list[object]:
        try:
            documents = list(yaml.load_all(text, Loader=_StringKeyLoader))
        except yaml.YAMLError as exc:
            raise ValueError(str(exc)) from exc
        return [document for document in documents if document is not None]


def _key_text(key: object) -> str:
    # Paths address keys as text; bools keep their YAML spelling.
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    return str(key)
