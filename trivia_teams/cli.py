"""Command-line front end for Trivia Teams."""

import click
import sys
import re
from pathlib import Path
from typing import Optional

import pandas as pd
import yaml

from trivia_teams.assigner import TeamAssigner
from trivia_teams.atoms import merge_links
from trivia_teams.config import Config
from trivia_teams.targets import MIN_TEAM_COUNT, clamp_team_count
from trivia_teams.validators import validate_links, validate_people_names


SEPARATOR_RE = re.compile(r"\s*,\s*")
OUTPUT_FORMATS = (".csv", ".yaml", ".yml")

def read_roster(roster_file: Path) -> list[str]:
  """Read player names from a file.

  CSV files contribute the first column (below its header). Any other file
  may be comma-separated, newline-separated, or mixed.
  """
  if roster_file.suffix.lower() == ".csv":
    df = pd.read_csv(roster_file)
    if df.shape[1] == 0:
      return []
    names = df.iloc[:, 0].dropna().astype(str).str.strip()
    return [name for name in names if name]

  with open(roster_file, "r", encoding="utf-8") as f:
    names = []
    for line in f.readlines():
      line = line.strip()
      if not line:
        continue
      names.extend(name for name in SEPARATOR_RE.split(line) if name)
    return names

def load_config(config_file: Optional[Path]) -> Config:
  config = Config()
  if config_file is not None:
    config.load_from_file(config_file)
  return config

def fail(message: str) -> None:
  click.secho(f"Error: {message}", fg="red")
  sys.exit(1)

@click.group()
def cli():
  """Trivia Teams CLI for splitting players into balanced teams."""
  pass

@cli.command()
@click.argument("config_file", type=click.Path(path_type=Path))
@click.option("--force", is_flag=True, help="Overwrite an existing config file")
def init(config_file: Path, force: bool):
  """Write a default config file."""
  if config_file.exists() and not force:
    fail(f"Config file {config_file} already exists; use --force to overwrite")

  config = Config()
  config.people = ["Alice", "Bob", "Carol", "Dave"]
  config.links = [["Alice", "Bob"]]
  config.save_to_file(config_file)
  click.secho(f"Wrote default config to {config_file}", fg="green")

@cli.command()
@click.option("--config", "config_file", type=click.Path(exists=True, path_type=Path),
              help="YAML config with people, links and team settings")
@click.option("--player", "-p", "players", multiple=True, help="Add a player")
@click.option("--roster", "roster_file", type=click.Path(exists=True, path_type=Path),
              help="File of player names")
@click.option("--link", "-l", "links", multiple=True,
              help='Players that must share a team, e.g. "Alice,Bob"')
@click.option("--teams", "-n", "team_count", type=int, help="Number of teams")
@click.option("--seed", type=int, help="Seed for a reproducible roll")
@click.option("--output", "output_file", type=click.Path(path_type=Path),
              help="Save teams to a .csv or .yaml file")
def assign(config_file: Optional[Path], players: tuple[str, ...], roster_file: Optional[Path],
           links: tuple[str, ...], team_count: Optional[int], seed: Optional[int],
           output_file: Optional[Path]):
  """Split players into balanced teams."""
  if output_file is not None and output_file.suffix.lower() not in OUTPUT_FORMATS:
    fail(f"Unsupported output format {output_file.suffix or '(none)'}; use .csv or .yaml")

  try:
    config = load_config(config_file)
    people = list(config.people)
    if roster_file is not None:
      people.extend(read_roster(roster_file))
    people.extend(name.strip() for name in players if name.strip())

    all_links = list(config.links) + [Config.parse_link(link) for link in links]

    validate_people_names(people)
    validate_links(all_links, people)
  except (ValueError, FileNotFoundError, yaml.YAMLError) as e:
    fail(str(e))

  if team_count is None:
    team_count = config.team_count
  if team_count < MIN_TEAM_COUNT:
    click.secho(f"Team count {team_count} raised to {MIN_TEAM_COUNT}", fg="yellow")
  team_count = clamp_team_count(team_count)

  if seed is not None:
    config.seed = seed

  click.secho(f"Players ({len(people)}): {', '.join(people)}", fg="blue")
  for group in merge_links(all_links):
    click.secho(f"Linked: {' + '.join(group)}", fg="blue")

  assigner = TeamAssigner(config)
  teams = assigner.partition(people, all_links, team_count)

  for team in teams:
    click.secho(f"\n{team.name}", bold=True)
    for member in team.members:
      click.echo(f"  • {member}")
    click.echo(f"  Team Size: {team.size} (target {team.target_size})")
    if team.deviation > 0:
      click.secho(f"  {team.name} is {team.deviation} over target because of linked players", fg="yellow")

  if output_file is not None:
    if output_file.suffix.lower() == ".csv":
      assigner.save_teams_csv(teams, output_file)
    else:
      assigner.save_teams_yaml(teams, output_file)
    click.secho(f"\nSaved teams to {output_file}", fg="green")

@cli.command()
@click.argument("config_file", type=click.Path(exists=True, path_type=Path))
def validate(config_file: Path):
  """Validate the people and links in a config file."""
  try:
    config = load_config(config_file)
  except (ValueError, yaml.YAMLError) as e:
    fail(str(e))

  errors = {"people": [], "links": []}
  try:
    validate_people_names(config.people)
  except ValueError as e:
    errors["people"].append(str(e))
  for link in config.links:
    try:
      validate_links([link], config.people)
    except ValueError as e:
      errors["links"].append(str(e))

  for error_type, error_list in errors.items():
    if error_list:
      click.secho(f"\n{error_type.title()}:", fg="red")
      for error in error_list:
        click.secho(f"  • {error}", fg="red")

  if not any(errors.values()):
    click.secho("✅ Config is valid!", fg="green")
  else:
    click.secho(f"\n❌ Found validation errors in {config_file}", fg="red")
    sys.exit(1)

if __name__ == "__main__":
  cli()
