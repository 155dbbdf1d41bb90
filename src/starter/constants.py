"""Constants for the starter installer."""

# Subprocess timeouts (seconds)
PACKAGE_INSTALL_TIMEOUT = 900  # composer/npm can be slow on a cold cache

# Number of output characters kept on ProcessError
ERROR_OUTPUT_TAIL = 2000

# Directories created under app/, each seeded with a .gitkeep
APP_DIRECTORIES = ["Actions", "DataObjects", "Enums", "Services", "Support"]
GITKEEP = ".gitkeep"

# (stub path, project path) pairs copied when the destination is missing
CONFIG_STUBS = [
    ("phpstan.neon", "phpstan.neon"),
    (".github/workflows/ci.yml", ".github/workflows/ci.yml"),
]

COMPOSER_MANIFEST = "composer.json"
COMPOSER_LOCK = "composer.lock"
PACKAGE_MANIFEST = "package.json"

# Added to composer.json only where the key is absent
COMPOSER_SCRIPTS: dict[str, list[str]] = {
    "test": [
        "@php artisan config:clear --ansi",
        "@php artisan test",
    ],
    "analyse": [
        "vendor/bin/phpstan analyse --memory-limit=1G",
    ],
}

REQUIRE_PACKAGES = [
    "filament/filament",
    "laravel/horizon",
    "laravel/pulse",
    "laravel/telescope",
    "spatie/laravel-data",
    "spatie/laravel-backup",
    "predis/predis",
    "sentry/sentry-laravel",
]

REQUIRE_DEV_PACKAGES = [
    "laravel/boost",
    "pestphp/pest",
    "larastan/larastan",
    "barryvdh/laravel-ide-helper",
]

NPM_DEV_PACKAGES = ["vitepress"]

PEST_BINARY = "vendor/bin/pest"
PEST_CONFIG = "tests/Pest.php"

DOCS_STUB_DIR = "docs-site"
DOCS_DIR = "docs-site"

# Force-set in package.json when the docs site is installed
DOCS_SCRIPTS = {
    "docs:dev": "vitepress dev docs-site",
    "docs:build": "vitepress build docs-site",
    "docs:preview": "vitepress preview docs-site",
}

NEXT_STEPS = [
    "Run: composer analyse (to verify PHPStan setup)",
    "Run: php artisan test (to verify Pest setup)",
    "Run: npm run docs:dev (to view documentation)",
    "Visit: /admin (Filament admin panel)",
    "Visit: /telescope (debugging dashboard)",
    "Visit: /horizon (queue dashboard)",
    "Visit: /pulse (performance dashboard)",
]
