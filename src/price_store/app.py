import argparse
import logging
import os
from typing import List, Optional

from flask import Flask, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from .errors import InternalError, PriceStoreError, ValidationError
from .models import parse_price_id, parse_price_payload
from .store import PriceStore


logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, DELETE",
    "Access-Control-Allow-Headers": "authorization, content-type",
}


def _store() -> PriceStore:
    return current_app.extensions["price_store"]


def list_prices():
    prices = _store().list_all()
    return jsonify({"prices": [p.to_dict() for p in prices]}), 200


def create_price():
    data = request.get_json(silent=True)
    record = _store().create(parse_price_payload(data))
    return jsonify(record.to_dict()), 201


def get_price(price_id: str):
    record = _store().get(parse_price_id(price_id))
    return jsonify(record.to_dict()), 200


def delete_price(price_id: str):
    _store().delete(parse_price_id(price_id))
    return jsonify({"status": "ok"}), 200


def _handle_store_error(err: PriceStoreError):
    if isinstance(err, ValidationError):
        logger.warning("Rejected %s %s: %s", request.method, request.path, err.message)
    return jsonify(err.to_dict()), err.status_code


def _handle_http_error(err: HTTPException):
    return jsonify({"error": err.description}), err.code


def _handle_unexpected_error(err: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.path)
    internal = InternalError()
    return jsonify(internal.to_dict()), internal.status_code


def _add_cors_headers(response):
    response.headers.update(CORS_HEADERS)
    return response


def create_app(store: Optional[PriceStore] = None) -> Flask:
    app = Flask(__name__)
    app.extensions["price_store"] = store if store is not None else PriceStore()

    app.add_url_rule("/prices", view_func=list_prices, methods=["GET"])
    app.add_url_rule("/prices", view_func=create_price, methods=["POST"])
    app.add_url_rule("/prices/<price_id>", view_func=get_price, methods=["GET"])
    app.add_url_rule("/prices/<price_id>", view_func=delete_price, methods=["DELETE"])

    app.register_error_handler(PriceStoreError, _handle_store_error)
    app.register_error_handler(HTTPException, _handle_http_error)
    app.register_error_handler(Exception, _handle_unexpected_error)
    app.after_request(_add_cors_headers)
    return app


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Serve the in-memory price store over HTTP"
    )
    parser.add_argument(
        "--host",
        default=os.environ.get("HOST", "0.0.0.0"),
        help="Interface to bind (env HOST)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.environ.get("PORT", "3000")),
        help="Port to listen on (env PORT)",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get("LOG_LEVEL", "INFO"),
        help="Logging level (env LOG_LEVEL)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app()
    logger.info("Listening on %s:%d", args.host, args.port)
    # threaded=True so a request waiting on the store lock never blocks accept
    app.run(host=args.host, port=args.port, threaded=True)
    return 0
