"""
Binding Manager

Owns the single active destination binding and routes generated content to
it. Only one destination is bound at a time: binding a different kind while
one is bound asks the user to confirm the replacement, binding the same kind
again is rejected without asking.

Resource-bound destinations (terminal, text editor) are unbound automatically
when their resource closes. Chat destinations ignore closure events.

Content is always written to the clipboard first, so a skipped or failed
delivery never loses it.
"""

import logging
from enum import Enum
from typing import Any, Callable, List, Optional, Tuple

from ..destinations.base import BindOptions, DestinationKind, PasteDestination
from ..destinations.factory import DestinationFactory
from ..errors import (
    AlreadyBoundError,
    ConflictDeclinedError,
    DeliveryFailedError,
    DestinationNotBoundError,
    DestinationUnavailableError,
    FocusFailedError,
    PrerequisiteMissingError,
)
from ..host import (
    Clipboard,
    ConfirmationPrompt,
    Disposable,
    EditorHandle,
    ResourceEvents,
    TerminalHandle,
)
from .results import (
    FAILURE_GUIDANCE,
    BindingChange,
    BindOutcome,
    BindResult,
    FocusOutcome,
    FocusResult,
    SendOutcome,
    SendResult,
)

logger = logging.getLogger(__name__)


# Type alias for binding change callbacks
OnBindingChangedCallback = Callable[[BindingChange], None]


class ContentType(Enum):
    LINK = "link"
    TEXT = "text"


class BindingManager:
    """
    Single-binding state machine and content delivery pipeline.

    States are Unbound and Bound(destination, resource). All entry points are
    expected to run on one event loop; operations never overlap, so no
    locking is needed.

    Example:
        manager = BindingManager(factory, clipboard, prompt, events)
        await manager.bind(TerminalBindOptions(terminal))
        result = await manager.send_link_to_destination("src/a.ts#L10")
        result.outcome  # SendOutcome.AUTO_DELIVERED
        manager.dispose()
    """

    REPLACE_LABEL = "Yes, replace"
    KEEP_LABEL = "No, keep current binding"

    def __init__(
        self,
        factory: DestinationFactory,
        clipboard: Clipboard,
        prompt: ConfirmationPrompt,
        events: ResourceEvents,
        on_binding_changed: Optional[OnBindingChangedCallback] = None,
    ):
        """
        Initialize the manager and subscribe to resource-closure events.

        Args:
            factory: Creates destinations from bind requests
            clipboard: Fallback surface written on every send
            prompt: Binary choice used to confirm replacing a binding
            events: Terminal/document closure notifications
            on_binding_changed: Called on bound, replaced, unbound and
                removed-by-closure transitions
        """
        self.factory = factory
        self.clipboard = clipboard
        self.prompt = prompt
        self.on_binding_changed = on_binding_changed

        self._bound: Optional[PasteDestination] = None
        self._bound_resource: Optional[Any] = None

        self._disposables: List[Disposable] = [
            events.on_did_close_terminal(self._on_terminal_closed),
            events.on_did_close_document(self._on_document_closed),
        ]

    # ------------------------------------------------------------------
    # State queries
    # ------------------------------------------------------------------

    def is_bound(self) -> bool:
        return self._bound is not None

    def get_bound_destination(self) -> Optional[PasteDestination]:
        return self._bound

    @property
    def bound_resource(self) -> Optional[Any]:
        """Resource handle held for closure detection (None for chat bindings)."""
        return self._bound_resource

    # ------------------------------------------------------------------
    # Binding
    # ------------------------------------------------------------------

    async def bind(self, options: BindOptions) -> BindResult:
        """
        Bind to the destination described by options.

        Args:
            options: Typed bind request

        Returns:
            BindResult; truthy for BOUND and REPLACED

        Raises:
            DestinationNotImplementedError: If the kind has no implementation.
                Raised before any state is touched.
        """
        destination = self.factory.create(options)
        kind = destination.kind
        name = destination.display_name

        if self._bound is not None and self._bound.kind == kind:
            logger.info(f"Already bound to {self._bound.display_name}, no action taken")
            return BindResult(
                outcome=BindOutcome.ALREADY_BOUND,
                destination_name=self._bound.display_name,
                destination_kind=kind,
                error=AlreadyBoundError(f"Already bound to {self._bound.display_name}"),
            )

        if kind.is_resource_bound and destination.resource is None:
            logger.warning(f"Cannot bind {kind.value}: no active {kind.value} resource")
            reason = await destination.unavailable_reason()
            return BindResult(
                outcome=BindOutcome.PREREQUISITE_MISSING,
                destination_name=name,
                destination_kind=kind,
                reason=reason,
                error=PrerequisiteMissingError(
                    f"No active {kind.value} to bind",
                    details={"kind": kind.value},
                ),
            )

        if not await destination.is_available():
            reason = await destination.unavailable_reason()
            logger.warning(f"Cannot bind: {name} not available ({reason.value})")
            return BindResult(
                outcome=BindOutcome.DESTINATION_UNAVAILABLE,
                destination_name=name,
                destination_kind=kind,
                reason=reason,
                error=DestinationUnavailableError(
                    f"{name} not available",
                    details={"kind": kind.value, "reason": reason.value},
                ),
            )

        previous = self._bound
        if previous is not None:
            confirmed = await self._confirm_replace(previous, destination)

            if self._bound is not previous:
                # Binding changed while the prompt was open
                logger.info(f"Binding to {previous.display_name} changed during confirmation, retrying bind")
                return await self.bind(options)

            if not confirmed:
                logger.debug(f"User kept binding to {previous.display_name}")
                return BindResult(
                    outcome=BindOutcome.CONFLICT_DECLINED,
                    destination_name=name,
                    destination_kind=kind,
                    previous_name=previous.display_name,
                    error=ConflictDeclinedError(
                        f"Kept existing binding to {previous.display_name}"
                    ),
                )

        self._bound = destination
        self._bound_resource = destination.resource

        if previous is not None:
            logger.info(f"Unbound {previous.display_name}, now bound to {name}")
            result = BindResult(
                outcome=BindOutcome.REPLACED,
                destination_name=name,
                destination_kind=kind,
                previous_name=previous.display_name,
            )
        else:
            logger.info(f"Bound to {name} {destination.get_logging_details()}")
            result = BindResult(
                outcome=BindOutcome.BOUND,
                destination_name=name,
                destination_kind=kind,
            )

        self._notify(result)
        return result

    async def bind_and_focus(self, options: BindOptions) -> Tuple[BindResult, Optional[FocusResult]]:
        """
        Bind, then bring the new destination into view.

        Returns:
            The bind result and, if binding succeeded, the focus result
        """
        bind_result = await self.bind(options)
        if not bind_result:
            return bind_result, None
        return bind_result, await self.focus_bound_destination()

    def unbind(self) -> BindResult:
        """
        Clear the current binding.

        Returns:
            UNBOUND if a destination was bound, NOTHING_BOUND otherwise
        """
        if self._bound is None:
            logger.info("No destination bound")
            return BindResult(outcome=BindOutcome.NOTHING_BOUND)

        destination = self._clear()
        logger.info(f"Unbound from {destination.display_name}")

        result = BindResult(
            outcome=BindOutcome.UNBOUND,
            destination_name=destination.display_name,
            destination_kind=destination.kind,
        )
        self._notify(result)
        return result

    async def _confirm_replace(self, current: PasteDestination, new: PasteDestination) -> bool:
        choice = await self.prompt.choose(
            f"Already bound to {current.display_name}. Replace with {new.display_name}?",
            [self.REPLACE_LABEL, self.KEEP_LABEL],
        )
        confirmed = choice == self.REPLACE_LABEL
        logger.debug(
            f"Replace {current.kind.value} with {new.kind.value}: "
            f"{'confirmed' if confirmed else 'declined'} (choice={choice!r})"
        )
        return confirmed

    def _clear(self) -> PasteDestination:
        destination = self._bound
        self._bound = None
        self._bound_resource = None
        return destination

    # ------------------------------------------------------------------
    # Resource closure
    # ------------------------------------------------------------------

    def _on_terminal_closed(self, terminal: TerminalHandle) -> None:
        if self._bound is None or self._bound.kind != DestinationKind.TERMINAL:
            return
        if terminal is not self._bound_resource:
            return

        logger.info(f"Bound terminal closed: {terminal.name}, auto-unbinding")
        self._remove_by_closure()

    def _on_document_closed(self, uri: str) -> None:
        if self._bound is None or self._bound.kind != DestinationKind.TEXT_EDITOR:
            return
        editor: EditorHandle = self._bound_resource
        if editor is None or editor.uri != uri:
            return

        logger.info(f"Bound document closed: {editor.display_name}, auto-unbinding")
        self._remove_by_closure()

    def _remove_by_closure(self) -> None:
        destination = self._clear()
        self._notify(BindResult(
            outcome=BindOutcome.REMOVED_BY_CLOSURE,
            destination_name=destination.display_name,
            destination_kind=destination.kind,
        ))

    # ------------------------------------------------------------------
    # Delivery
    # ------------------------------------------------------------------

    async def send_link_to_destination(self, link: str, source_uri: Optional[str] = None) -> SendResult:
        """
        Copy a generated link and deliver it to the bound destination.

        Args:
            link: Formatted link text
            source_uri: Document the link was generated from (self-paste guard)
        """
        return await self._send(link, ContentType.LINK, source_uri)

    async def send_text_to_destination(self, text: str, source_uri: Optional[str] = None) -> SendResult:
        """
        Copy selected text and deliver it to the bound destination.

        Args:
            text: Raw text content
            source_uri: Document the text was selected in (self-paste guard)
        """
        return await self._send(text, ContentType.TEXT, source_uri)

    async def _send(self, content: str, content_type: ContentType, source_uri: Optional[str]) -> SendResult:
        await self.clipboard.write_text(content)

        destination = self._bound
        if destination is None:
            logger.debug(f"No destination bound, {content_type.value} copied to clipboard only")
            return SendResult(outcome=SendOutcome.CLIPBOARD_ONLY)

        name = destination.display_name
        kind = destination.kind

        if content_type == ContentType.LINK:
            eligible = await destination.is_eligible_for_paste_link(content, source_uri)
        else:
            eligible = await destination.is_eligible_for_paste_content(content, source_uri)

        if not eligible:
            logger.debug(f"{content_type.value} not eligible for {name}, clipboard only")
            return SendResult(
                outcome=SendOutcome.CLIPBOARD_ONLY,
                destination_name=name,
                destination_kind=kind,
            )

        logger.debug(f"Sending {content_type.value} to {name} ({len(content)} chars)")
        if content_type == ContentType.LINK:
            delivered = await destination.paste_link(content)
        else:
            delivered = await destination.paste_content(content)

        if delivered:
            instruction = destination.get_user_instruction()
            if instruction:
                return SendResult(
                    outcome=SendOutcome.MANUAL_INSTRUCTION,
                    destination_name=name,
                    destination_kind=kind,
                    instruction=instruction,
                )
            return SendResult(
                outcome=SendOutcome.AUTO_DELIVERED,
                destination_name=name,
                destination_kind=kind,
            )

        logger.warning(f"Paste {content_type.value} failed to {name} {destination.get_logging_details()}")
        return SendResult(
            outcome=SendOutcome.FAILED_WITH_GUIDANCE,
            destination_name=name,
            destination_kind=kind,
            guidance=FAILURE_GUIDANCE[kind],
            error=DeliveryFailedError(
                f"Paste {content_type.value} failed to {name}",
                details={"kind": kind.value, **destination.get_logging_details()},
            ),
        )

    # ------------------------------------------------------------------
    # Focus
    # ------------------------------------------------------------------

    async def focus_bound_destination(self) -> FocusResult:
        """Bring the bound destination into view without delivering content."""
        destination = self._bound
        if destination is None:
            return FocusResult(
                outcome=FocusOutcome.NOT_BOUND,
                error=DestinationNotBoundError("No destination is currently bound"),
            )

        name = destination.display_name
        if not await destination.focus():
            logger.warning(f"Failed to focus {name}")
            return FocusResult(
                outcome=FocusOutcome.FOCUS_FAILED,
                destination_name=name,
                destination_kind=destination.kind,
                error=FocusFailedError(f"Failed to focus destination: {name}"),
            )

        logger.info(f"Focused {name}")
        return FocusResult(
            outcome=FocusOutcome.FOCUSED,
            destination_name=name,
            destination_kind=destination.kind,
            message=destination.get_focus_success_message(),
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def _notify(self, change: BindingChange) -> None:
        if self.on_binding_changed:
            self.on_binding_changed(change)

    def dispose(self) -> None:
        """Unsubscribe from closure events. Safe to call more than once."""
        disposables, self._disposables = self._disposables, []
        for disposable in disposables:
            disposable.dispose()
