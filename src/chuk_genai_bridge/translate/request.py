"""
Request Translator
==================

Maps a vendor-neutral generation request onto a chat-completions request
body. Pure and synchronous: no I/O, and the only non-determinism is the
call-id factory, which is injectable.
"""

from __future__ import annotations

import logging

from chuk_genai_bridge.core import (
    Content,
    Default,
    GenerateContentConfig,
    GenerateContentRequest,
    Part,
    PartKind,
    Role,
    SystemInstruction,
    ToolChoice,
    WireFunction,
    WireFunctionCall,
    WireMessage,
    WireRequest,
    WireRole,
    WireTool,
    WireToolCall,
    dumps,
)

from .ids import CallIdFactory, new_call_id

logger = logging.getLogger(__name__)

_ROLE_MAP = {
    Role.MODEL: WireRole.ASSISTANT,
    Role.ASSISTANT: WireRole.ASSISTANT,
    Role.USER: WireRole.USER,
    Role.SYSTEM: WireRole.SYSTEM,
}

JSON_SCHEMA_INSTRUCTION = (
    "IMPORTANT: You must respond with valid JSON that follows this exact schema:\n"
    "{schema}\n\n"
    "Return only the JSON object, no additional text or markdown formatting."
)


class RequestTranslator:
    """
    Translates GenerateContentRequest values for one target model.

    Turn parts are handled with a fixed precedence: function response,
    then function call, then text, then placeholders for anything else.
    A turn mixing kinds only uses its highest-precedence kind.
    """

    def __init__(self, model: str, id_factory: CallIdFactory = new_call_id):
        self.model = model
        self.id_factory = id_factory

    def translate(self, request: GenerateContentRequest, streaming: bool) -> WireRequest:
        config = request.config or GenerateContentConfig()
        messages: list[WireMessage] = []

        system_text = self._system_text(config)
        if system_text:
            messages.append(WireMessage(role=WireRole.SYSTEM, content=system_text))

        for content in request.contents:
            message = self._translate_turn(content)
            if message is not None:
                messages.append(message)

        tools = self._translate_tools(config)

        wire = WireRequest(
            model=self.model,
            messages=messages,
            stream=streaming,
            temperature=config.temperature,
            top_p=config.top_p,
            tools=tools or None,
            tool_choice=ToolChoice.AUTO if tools else None,
        )

        logger.debug(
            f"Translated request: model={self.model}, stream={streaming}, "
            f"messages={len(messages)}, tools={len(tools)}"
        )
        return wire

    def _system_text(self, config: GenerateContentConfig) -> str:
        text = SystemInstruction.resolve(config.system_instruction).text

        if (
            config.response_mime_type == Default.JSON_MIME_TYPE
            and config.response_json_schema is not None
        ):
            instruction = JSON_SCHEMA_INSTRUCTION.format(
                schema=dumps(config.response_json_schema, indent=True)
            )
            text += ("\n\n" if text else "") + instruction

        return text

    def _translate_turn(self, content: Content) -> WireMessage | None:
        parts = content.parts
        if not parts:
            return None

        role = _ROLE_MAP[content.role]

        response_part = _first_of_kind(parts, PartKind.FUNCTION_RESPONSE)
        if response_part is not None:
            fr = response_part.function_response
            return WireMessage(
                role=WireRole.TOOL,
                content=dumps(fr.response),
                tool_call_id=fr.id or Default.UNKNOWN_CALL_ID,
            )

        call_part = _first_of_kind(parts, PartKind.FUNCTION_CALL)
        if call_part is not None:
            fc = call_part.function_call
            return WireMessage(
                role=WireRole.ASSISTANT,
                content=None,
                tool_calls=[
                    WireToolCall(
                        id=fc.id or self.id_factory(),
                        function=WireFunctionCall(
                            name=fc.name or "", arguments=dumps(fc.args or {})
                        ),
                    )
                ],
            )

        texts = [p.text for p in parts if p.kind is PartKind.TEXT]
        if texts:
            return WireMessage(role=role, content="".join(texts))

        return WireMessage(
            role=role, content="\n".join(_placeholder(p) for p in parts)
        )

    @staticmethod
    def _translate_tools(config: GenerateContentConfig) -> list[WireTool]:
        tools: list[WireTool] = []
        for tool in config.tools or []:
            for func in tool.function_declarations or []:
                if func.parameters_json_schema is not None:
                    parameters = func.parameters_json_schema
                elif func.parameters is not None:
                    parameters = func.parameters
                else:
                    parameters = {}
                tools.append(
                    WireTool(
                        function=WireFunction(
                            name=func.name or Default.UNKNOWN_FUNCTION_NAME,
                            description=func.description,
                            parameters=parameters,
                        )
                    )
                )
        return tools


def _first_of_kind(parts: list[Part], kind: PartKind) -> Part | None:
    return next((p for p in parts if p.kind is kind), None)


def _placeholder(part: Part) -> str:
    if part.file_data is not None:
        fd = part.file_data
        return f"[File: {fd.display_name or fd.file_uri or Default.UNKNOWN_FILE_NAME}]"
    return "[Unsupported content type]"


def translate_request(
    request: GenerateContentRequest,
    model: str,
    streaming: bool = False,
    id_factory: CallIdFactory = new_call_id,
) -> WireRequest:
    """Translate one request without keeping a translator around."""
    return RequestTranslator(model, id_factory=id_factory).translate(request, streaming)
