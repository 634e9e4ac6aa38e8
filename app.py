import logging
from flask import Flask, request, jsonify
from flask_cors import CORS
from src.catalog import CatalogError
from src.search_engine import initialize_engine
from src.utils.config import Config

logger = logging.getLogger(__name__)

app = Flask(__name__)

# Initialize CORS, allowing all origins for now.
# For production, specify origins: CORS(app, origins=["http://localhost:3000"])
CORS(app)

# One engine and catalog loader shared by every request
search_engine, catalog_loader = initialize_engine()

@app.route('/', methods=['GET'])
def home():
    return jsonify({"message": "Smart search API is running"})

@app.route('/api/v1/local-products', methods=['GET'])
def local_products():
    try:
        products = catalog_loader.get_products()
    except CatalogError as e:
        logger.error(f"Error loading products: {e}")
        return jsonify({"success": False, "message": "Error loading products"}), 500

    return jsonify({
        "success": True,
        "products": [product.model_dump() for product in products]
    })

@app.route('/api/v1/ai-search', methods=['POST'])
def ai_search():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"success": False, "message": "Invalid JSON payload"}), 400

    query = data.get('query')
    if not isinstance(query, str) or not query.strip():
        logger.info("Rejected search request without a query")
        return jsonify({"success": False, "message": "Search query is required"}), 400

    try:
        products = catalog_loader.get_products()
        outcome = search_engine.search(query, products)
    except Exception as e:
        logger.error(f"Error performing AI search: {e}", exc_info=True)
        return jsonify({"success": False, "message": "Error performing AI search"}), 500

    return jsonify({
        "success": True,
        "query": query,
        "results": [result.model_dump(by_alias=True) for result in outcome.results],
        "totalResults": outcome.total_results
    })

if __name__ == "__main__":
    # Note: For development, Flask's built-in server is fine.
    # For production, use a proper WSGI server like Gunicorn or uWSGI.
    config = Config()
    app.run(debug=config.FLASK_DEBUG, host=config.API_HOST, port=config.API_PORT)
