import subprocess
import sys

# paths vêm de cnpj_exporter.utils.config (CNPJ_SOURCE, CNPJ_OUTPUT, CNPJ_REJECTS, DATA_CONTRACTS)
STEPS = [
    [sys.executable, "-m", "etl.split_cnpjs"],
    [sys.executable, "-m", "etl.validate_data"],
]

def main():
    for cmd in STEPS:
        print("→", " ".join(cmd))
        res = subprocess.run(cmd)
        if res.returncode != 0:
            print("✖ etapa falhou:", " ".join(cmd))
            sys.exit(1)

if __name__ == "__main__":
    main()
