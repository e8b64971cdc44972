"""
Flask web application exposing bracket structure as JSON.

The tournament configuration is read from CONFIG_FILE on every request, so
edits to the YAML file show up without a restart.
"""
import os
import logging
from flask import Flask, jsonify, request, abort
from brackets.advancement import all_advancement_mappings, champion_advancement
from brackets.config import load_tournament_config, get_config_file
from brackets.matches import matches_for_round, renderable_matches
from brackets.sheet import generate_match_data, loss_total_formulas, winner_formulas
from brackets.tournament import MultiBracketTournament
from brackets.validation import ConfigurationError, get_validation_warnings

app = Flask(__name__)

CONFIG_FILE = get_config_file()

logging.basicConfig(level=os.environ.get('LOG_LEVEL', 'INFO'))


def load_tournament() -> MultiBracketTournament:
    """Build every configured bracket from the current config file."""
    config = load_tournament_config(CONFIG_FILE)
    return MultiBracketTournament(config)


def get_bracket_or_404(tournament: MultiBracketTournament, bracket_type: str):
    bracket = tournament.get_bracket(bracket_type)
    if bracket is None:
        abort(404, description=f'Bracket "{bracket_type}" is not configured.')
    return bracket


@app.errorhandler(ConfigurationError)
def handle_configuration_error(error):
    app.logger.warning(f'Configuration error: {error}')
    return jsonify({'success': False, 'error': str(error), 'errors': error.errors}), 400


@app.errorhandler(404)
def handle_not_found(error):
    return jsonify({'success': False, 'error': error.description}), 404


@app.route('/api/brackets', methods=['GET'])
def api_brackets():
    tournament = load_tournament()
    errors = tournament.validate()
    warnings = list(tournament.config.get_warnings())
    for bracket_type in tournament.bracket_types:
        bracket = tournament.get_bracket(bracket_type)
        warnings.extend(f'{bracket_type} bracket: {w}' for w in get_validation_warnings(bracket.entrants))
    return jsonify({
        'success': True,
        'summary': tournament.get_summary(),
        'ready': not errors,
        'errors': errors,
        'warnings': warnings,
    })


@app.route('/api/brackets/<bracket_type>/structure', methods=['GET'])
def api_bracket_structure(bracket_type):
    bracket = get_bracket_or_404(load_tournament(), bracket_type)
    return jsonify({'success': True, 'structure': bracket.bracket.export_structure()})


@app.route('/api/brackets/<bracket_type>/rounds/<int:round_index>/matches', methods=['GET'])
def api_round_matches(bracket_type, round_index):
    bracket = get_bracket_or_404(load_tournament(), bracket_type)
    renderable = request.args.get('renderable', '0').lower() in ('1', 'true', 'yes')
    try:
        if renderable:
            matches = renderable_matches(bracket.bracket, round_index)
        else:
            matches = matches_for_round(bracket.bracket, round_index)
    except IndexError as e:
        abort(404, description=str(e))
    return jsonify({
        'success': True,
        'round': bracket.bracket.get_round_label(round_index),
        'matches': [m.to_dict() for m in matches],
    })


@app.route('/api/brackets/<bracket_type>/advancement', methods=['GET'])
def api_advancement(bracket_type):
    bracket = get_bracket_or_404(load_tournament(), bracket_type).bracket
    mappings = [m.to_dict() for m in all_advancement_mappings(bracket)]
    champion = champion_advancement(bracket).to_dict() if bracket.num_rounds else None
    return jsonify({'success': True, 'mappings': mappings, 'champion': champion})


@app.route('/api/brackets/<bracket_type>/formulas', methods=['GET'])
def api_formulas(bracket_type):
    tournament = load_tournament()
    bracket = get_bracket_or_404(tournament, bracket_type)
    config = tournament.config
    default_best_of = config.get_best_of(bracket_type)
    default_max_score = config.get_max_score(bracket_type)
    try:
        best_of = int(request.args.get('best_of', default_best_of))
        max_score = int(request.args.get('max_score', default_max_score))
    except ValueError:
        return jsonify({'success': False, 'error': 'best_of and max_score must be integers.'}), 400

    app.logger.info(f'Generating {bracket_type} winner formulas (best_of={best_of}, max_score={max_score})')
    return jsonify({
        'success': True,
        'match_data': generate_match_data(bracket.bracket, bracket_type),
        'formulas': winner_formulas(bracket.bracket, max_score, best_of),
        'loss_total_formulas': loss_total_formulas(bracket.bracket, max_score, best_of),
    })


if __name__ == '__main__':
    app.run(debug=os.environ.get('FLASK_DEBUG') == '1')
