"""Fully resolved bundler configuration models."""

import typing as t
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_serializer

from .environment import EnvironmentName

BUNDLE_FILENAME: t.Final = "devand.js"
WASM_MODULE_FILENAME: t.Final = "devand.wasm"
STATIC_ASSETS_DIR: t.Final = "./static"
CRATE_DIRECTORY: t.Final = "."
WASM_PACK_BASE_ARGS: t.Final = "--no-typescript --"
STYLESHEET_PATTERN: t.Final = r"\.s[ac]ss$"
STYLESHEET_LOADERS: t.Final = ("style-loader", "css-loader", "sass-loader")
DEFAULT_DEV_SERVER_HOST: t.Final = "0.0.0.0"
DEFAULT_DEV_SERVER_PORT: t.Final = 8001


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class OutputSettings(_Frozen):
    """Where and under which names the bundle is emitted."""

    path: Path
    filename: str = BUNDLE_FILENAME
    public_path: str = Field(default="", serialization_alias="publicPath")
    webassembly_module_filename: str = Field(
        default=WASM_MODULE_FILENAME,
        serialization_alias="webassemblyModuleFilename",
    )


class ModuleRule(_Frozen):
    """Source transform rule: files matching ``test`` go through ``use``."""

    test: str
    flags: str = ""
    use: tuple[str, ...]


class CopyInstruction(_Frozen):
    """Static asset copy from ``source`` onto ``destination``."""

    source: str = Field(serialization_alias="from")
    destination: Path = Field(serialization_alias="to")


class WasmPackInvocation(_Frozen):
    """Arguments for the WebAssembly-producing compiler."""

    crate_directory: str = Field(
        default=CRATE_DIRECTORY, serialization_alias="crateDirectory"
    )
    feature_args: str = Field(default="", exclude=True)

    @computed_field(alias="extraArgs")  # type: ignore[prop-decorator]
    @property
    def extra_args(self) -> str:
        """Base compiler arguments followed by the rendered feature flags."""
        if not self.feature_args:
            return WASM_PACK_BASE_ARGS
        return f"{WASM_PACK_BASE_ARGS} {self.feature_args}"


class DevServer(_Frozen):
    """Development server descriptor."""

    content_base: Path = Field(serialization_alias="contentBase")
    host: str = DEFAULT_DEV_SERVER_HOST
    port: int = Field(default=DEFAULT_DEV_SERVER_PORT, ge=1, le=65535)
    compress: bool = False
    history_fallback: str | None = Field(
        default=None, serialization_alias="historyApiFallback"
    )

    @field_serializer("history_fallback")
    def _serialize_fallback(self, value: str | None) -> dict[str, str] | bool:
        if value is None:
            return False
        return {"index": value}


class ResolvedConfiguration(_Frozen):
    """Everything the external bundler needs for one build or serve run.

    Built once per invocation and never mutated afterwards.
    """

    environment: EnvironmentName = Field(exclude=True)
    entry: str
    output: OutputSettings
    module_rules: tuple[ModuleRule, ...] = Field(exclude=True)
    copy_instructions: tuple[CopyInstruction, ...] = Field(serialization_alias="copy")
    wasm_pack: WasmPackInvocation = Field(serialization_alias="wasmPack")
    watch: bool
    dev_server: DevServer = Field(serialization_alias="devServer")

    @property
    def serve_with_fallback(self) -> bool:
        """Whether the dev server rewrites unknown routes to an index page."""
        return self.dev_server.history_fallback is not None

    def to_webpack(self) -> dict[str, t.Any]:
        """Render as a JSON-compatible dict keyed the way webpack expects."""
        data = self.model_dump(mode="json", by_alias=True)
        data["module"] = {
            "rules": [rule.model_dump(mode="json") for rule in self.module_rules]
        }
        return data
