import json
import sys
from decimal import Decimal
from typing import Any, TextIO

import structlog

from safe_payments.application.services import (
    CardPaymentCommand,
    CashPaymentCommand,
    CheckPaymentCommand,
    ErrorResponse,
    PaymentService,
    to_error_response,
    to_payment_response,
)
from safe_payments.config import settings
from safe_payments.domain.payment import PaidPayment
from safe_payments.domain.result import Err, Ok, Result
from safe_payments.logging import configure_logging


logger = structlog.get_logger()


def process_request(service: PaymentService, request: dict[str, Any]) -> Result[PaidPayment] | ErrorResponse:
    method = request.get("method")
    amount = request.get("amount")
    match method:
        case "card":
            return service.process_card_payment(
                CardPaymentCommand(
                    card_number=request.get("card_number"),
                    expiry_month=request.get("expiry_month"),
                    expiry_year=request.get("expiry_year"),
                    cvv=request.get("cvv"),
                    amount=amount,
                )
            )
        case "check":
            return service.process_check_payment(
                CheckPaymentCommand(
                    routing_number=request.get("routing_number"),
                    account_number=request.get("account_number"),
                    amount=amount,
                )
            )
        case "cash":
            return service.process_cash_payment(CashPaymentCommand(amount=amount))
        case _:
            return ErrorResponse(message=f"Unsupported payment method: {method!r}")


def main(stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """Read one JSON payment request, write the JSON response. Returns the exit code."""
    configure_logging(level=settings.log_level, log_format=settings.log_format)
    source = stdin or sys.stdin
    sink = stdout or sys.stdout

    try:
        request = json.load(source, parse_float=Decimal)
    except (ValueError, RecursionError) as exc:
        logger.warning("invalid_request", error=str(exc))
        request = None

    if not isinstance(request, dict):
        outcome: Result[PaidPayment] | ErrorResponse = ErrorResponse(message="Request body must be a JSON object")
    else:
        outcome = process_request(PaymentService(), request)

    match outcome:
        case Ok(paid):
            body, exit_code = to_payment_response(paid).to_dict(), 0
        case Err(errors):
            body, exit_code = to_error_response(errors).to_dict(), 1
        case ErrorResponse():
            body, exit_code = outcome.to_dict(), 1

    json.dump(body, sink)
    sink.write("\n")
    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
