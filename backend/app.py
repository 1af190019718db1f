from flask import Flask, request, jsonify
from flask_cors import CORS
from regex_to_nfa_core import (
    compile_regex,
    build_machine_json,
)


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_mapping(CORS_ORIGINS="*")
    app.config.from_prefixed_env()
    if test_config is not None:
        app.config.update(test_config)

    CORS(app, origins=app.config["CORS_ORIGINS"])  # Allow React frontend to access backend

    @app.route("/health")
    def health():
        return jsonify({"status": "ok"})

    @app.route("/compile", methods=["POST"])
    def compile_endpoint():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        regex = data.get("regex", "")
        if not isinstance(regex, str):
            return jsonify({"success": False, "error": "regex must be a string", "kind": "invalid_input"}), 400
        regex = regex.strip()
        try:
            result = compile_regex(regex)
            if not result.ok:
                return (
                    jsonify({"success": False, "error": str(result.error), "kind": result.error.kind}),
                    400,
                )
            nfa = result.automaton
            app.logger.info("compiled %r into %d states", regex, nfa.state_count())
            return jsonify(
                {
                    "success": True,
                    "regex": regex,
                    "nfa": build_machine_json(nfa),
                    "display": nfa.display(),
                }
            )
        except Exception as e:
            app.logger.exception("failed to compile %r", regex)
            return jsonify({"success": False, "error": str(e)}), 500

    return app


app = create_app()


if __name__ == "__main__":
    app.run(debug=app.config.get("DEBUG", False))
