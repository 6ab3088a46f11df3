#!/usr/bin/env python3
"""Basic usage examples for the config-file library."""

import logging
import tempfile
from pathlib import Path

from config_file import ConfigFile


def wordpress_example(workspace: Path):
    """Update database settings in a wp-config.php."""
    print("=== wp-config.php Example ===")

    path = workspace / "wp-config.php"
    path.write_text(
        """<?php
define('DB_NAME', 'database_name_here');
define('DB_USER', 'username_here');
// define('WP_DEBUG', true);
"""
    )

    config = ConfigFile(path)
    print(f"DB_NAME before: {config.get_key('DB_NAME')}")

    config.set_key("DB_NAME", "wordpress")
    config.set_key("DB_HOST", "localhost")
    config.save(path)

    # WP_DEBUG holds a bare boolean, so switch to the unquoted dialect
    config.load(path, file_type="php-unquoted")
    if config.find("WP_DEBUG") and config.is_commented():
        config.uncomment()

    config.save(path)
    print(path.read_text())


def apache_example(workspace: Path):
    """Edit settings inside each virtual host of an Apache config."""
    print("\n=== Apache Virtual Host Example ===")

    path = workspace / "sites.conf"
    path.write_text(
        """Listen 80
<VirtualHost *:80>
    ServerName one.example.com
    DocumentRoot /var/www/one
</VirtualHost>
<VirtualHost *:80>
    ServerName two.example.com
    DocumentRoot /var/www/two
</VirtualHost>"""
    )

    config = ConfigFile(path)
    while config.isolate("<VirtualHost *:80>", "</VirtualHost>"):
        server_name = config.get_key("ServerName")
        print(f"Found virtual host {server_name}")
        if server_name == "two.example.com":
            config.set_key("ServerAdmin", "admin@example.com")

    config.create_region("# BEGIN managed", "# END managed")
    config.set_key("ServerTokens", "Prod")

    config.save(path)
    print(path.read_text())


def mysql_example(workspace: Path):
    """Walk duplicate keys in a my.cnf."""
    print("\n=== my.cnf Example ===")

    path = workspace / "my.cnf"
    path.write_text(
        """[mysqld]
# bind-address = 0.0.0.0
bind-address = 127.0.0.1
port = 3306"""
    )

    config = ConfigFile(path)
    while config.find("bind-address"):
        state = "commented" if config.is_commented() else "active"
        print(f"bind-address {config.get()} ({state})")
        if config.is_commented():
            config.remove()

    config.save(path)
    print(path.read_text())


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    with tempfile.TemporaryDirectory() as temp_dir:
        wordpress_example(Path(temp_dir))
        apache_example(Path(temp_dir))
        mysql_example(Path(temp_dir))

    print("\n=== All examples completed successfully! ===")
