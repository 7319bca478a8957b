"""
Unit tests for the path-template router.
"""

import pytest

from employee_service.handlers.utils.router import HandlerResult, RequestContext, Router, compile_template


def _handler(name):
    def handler(request: RequestContext) -> HandlerResult:
        return HandlerResult(status_code=200, body={"handler": name})
    return handler


@pytest.fixture
def router():
    router = Router()
    router.add_route('POST', '/employees', _handler('create'))
    router.add_route('GET', '/employees', _handler('list'))
    router.add_route('GET', '/employees/{id}', _handler('get'))
    router.add_route('PUT', '/employees/{id}', _handler('update'))
    router.add_route('DELETE', '/employees/{id}', _handler('delete'))
    return router


class TestCompileTemplate:
    """Test cases for path template compilation."""

    def test_literal_template(self):
        pattern, names = compile_template('/employees')

        assert names == ()
        assert pattern.fullmatch('/employees')
        assert not pattern.fullmatch('/employees/')

    def test_placeholder_matches_one_segment(self):
        pattern, names = compile_template('/employees/{id}')

        assert names == ('id',)
        assert pattern.fullmatch('/employees/abc-123').group('id') == 'abc-123'
        assert not pattern.fullmatch('/employees/a/b')
        assert not pattern.fullmatch('/employees/')

    def test_multiple_placeholders(self):
        pattern, names = compile_template('/teams/{team}/employees/{id}')

        found = pattern.fullmatch('/teams/core/employees/42')
        assert names == ('team', 'id')
        assert found.groupdict() == {'team': 'core', 'id': '42'}

    def test_literal_text_is_escaped(self):
        pattern, _ = compile_template('/v1.0/employees')

        assert pattern.fullmatch('/v1.0/employees')
        assert not pattern.fullmatch('/v1x0/employees')

    def test_duplicate_placeholder_rejected(self):
        with pytest.raises(ValueError, match="Duplicate path parameter"):
            compile_template('/a/{id}/b/{id}')


class TestRouterMatch:
    """Test cases for Router.match."""

    def test_matches_collection_route(self, router):
        match = router.match('GET', '/employees')

        assert match is not None
        assert match.route.template == '/employees'
        assert match.params == {}
        assert match.route.handler(RequestContext()).body == {"handler": "list"}

    def test_extracts_path_parameter(self, router):
        match = router.match('PUT', '/employees/01HZX3J9Q4B5V6N7M8K9P0R1S2')

        assert match.params == {'id': '01HZX3J9Q4B5V6N7M8K9P0R1S2'}
        assert match.route.handler(RequestContext()).body == {"handler": "update"}

    def test_method_must_match(self, router):
        assert router.match('PATCH', '/employees/abc') is None
        assert router.match('POST', '/employees/abc') is None

    def test_method_is_case_sensitive(self, router):
        assert router.match('get', '/employees') is None

    def test_path_is_anchored(self, router):
        assert router.match('GET', '/employees/abc/extra') is None
        assert router.match('GET', '/api/employees') is None
        assert router.match('GET', '/employees/') is None

    def test_unknown_path(self, router):
        assert router.match('GET', '/departments') is None

    def test_first_registered_route_wins(self):
        router = Router()
        router.add_route('GET', '/employees/{id}', _handler('by-id'))
        router.add_route('GET', '/employees/me', _handler('me'))

        match = router.match('GET', '/employees/me')

        assert match.route.handler(RequestContext()).body == {"handler": "by-id"}


class TestRouteDecorators:
    """Test cases for decorator registration."""

    def test_decorators_register_in_order(self):
        router = Router()

        @router.get('/employees')
        def list_employees(request):
            return HandlerResult(status_code=200, body=[])

        @router.delete('/employees/{id}')
        def delete_employee(request):
            return HandlerResult(status_code=204, body={})

        assert [(r.method, r.template) for r in router.routes] == [
            ('GET', '/employees'),
            ('DELETE', '/employees/{id}'),
        ]
        assert router.routes[1].param_names == ('id',)

    def test_decorator_returns_original_function(self):
        router = Router()

        def handler(request):
            return HandlerResult(status_code=200, body=None)

        assert router.post('/employees')(handler) is handler
