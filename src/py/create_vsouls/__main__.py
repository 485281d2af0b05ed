from create_vsouls.cli import create_project

if __name__ == "__main__":
    create_project(prog_name="create-vsouls")
