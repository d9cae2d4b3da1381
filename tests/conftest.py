"""Pytest configuration and fixtures."""

import pytest

from analyzers_core.config import Settings, get_settings

# Sample PHP code for testing. Each sample starts with the open tag on line 1.
SAMPLE_PHP_CLASS = """<?php

namespace App\\Http\\Controllers;

use App\\Models\\User;
use Illuminate\\Support\\Facades\\DB;

final class UserController extends Controller
{
    public function index($request)
    {
        $users = User::where('active', 1)->get();
        return view('users.index', ['users' => $users]);
    }

    public static function find($id)
    {
        return DB::select("SELECT * FROM users WHERE id = $id");
    }
}
"""

SAMPLE_PHP_DANGEROUS = """<?php

function run($cmd)
{
    system($cmd);
    $out = shell_exec('ls -la');
    $data = unserialize($_POST['data']);
    $fn = 'system';
    $fn('whoami');
    return $out . $data;
}
"""

SAMPLE_PHP_RAW_QUERIES = """<?php

class ReportRepository
{
    public function search($term, $column)
    {
        $safe = DB::select('SELECT * FROM reports WHERE id = ?', [1]);
        $unsafe = DB::select('SELECT * FROM reports WHERE name = ' . $term);
        $query = Report::query()->whereRaw("status = {$column}");
        $query->orderByRaw('created_at desc');
        return DB::raw('COUNT(*)');
    }
}
"""

SAMPLE_PHP_TYPES = """<?php

interface Shape
{
    public function area();
}

trait Greets
{
    public function greet()
    {
        return 'hi';
    }
}

enum Suit
{
    case Hearts;
    case Spades;
}

abstract class Base implements Shape
{
    use Greets;

    abstract public function area();

    protected function describe()
    {
        $double = fn($x) => $x * 2;
        $format = function ($value) {
            return $value;
        };
        return $format($double(2));
    }
}

function helper()
{
    return new Base();
}
"""

SAMPLE_PHP_DYNAMIC = """<?php

$obj->save();
$obj->$method();
$obj?->save();
$cls::create();
self::create();
\\Foo\\Bar::create();
$fn();
$$name = 1;
"""

SAMPLE_PHP_MALFORMED = """<?php

function broken( {
    return 1;
"""


@pytest.fixture
def sample_php_class():
    """Controller class with static and instance calls."""
    return SAMPLE_PHP_CLASS


@pytest.fixture
def sample_php_dangerous():
    """Function calling shell and eval-like functions."""
    return SAMPLE_PHP_DANGEROUS


@pytest.fixture
def sample_php_raw_queries():
    """Repository mixing safe and unsafe raw queries."""
    return SAMPLE_PHP_RAW_QUERIES


@pytest.fixture
def sample_php_types():
    """Interface, trait, enum, class and function declarations."""
    return SAMPLE_PHP_TYPES


@pytest.fixture
def sample_php_dynamic():
    """Calls and variables whose names are computed at runtime."""
    return SAMPLE_PHP_DYNAMIC


@pytest.fixture
def sample_php_malformed():
    """Source with a syntax error."""
    return SAMPLE_PHP_MALFORMED


@pytest.fixture
def settings(tmp_path):
    """Settings isolated from the process environment and any .env file."""
    return Settings(
        _env_file=None,
        app_env="production",
        environment_mapping={},
        show_code_snippets=True,
        snippet_context_lines=8,
        base_path=str(tmp_path),
        exclude_patterns=[],
    )


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reset the cached settings between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def write_php(tmp_path):
    """Write a PHP file under tmp_path and return its path."""

    def _write(relative_path: str, content: str):
        path = tmp_path / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
