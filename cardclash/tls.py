from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Tuple

from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.x509.oid import NameOID
from loguru import logger

KEY_FILE = "localhost-key.pem"
CERT_FILE = "localhost-cert.pem"

def cert_paths(certs_dir: str | Path) -> Tuple[Path, Path]:
    d = Path(certs_dir)
    return d / KEY_FILE, d / CERT_FILE

def generate_self_signed(common_name: str = "localhost", days: int = 365, key_size: int = 2048) -> Tuple[bytes, bytes]:
    key = rsa.generate_private_key(public_exponent=65537, key_size=key_size)
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, common_name)])
    now = datetime.now(timezone.utc)
    cert = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - timedelta(minutes=5))
        .not_valid_after(now + timedelta(days=days))
        .add_extension(x509.SubjectAlternativeName([x509.DNSName(common_name)]), critical=False)
        .sign(key, hashes.SHA256())
    )
    key_pem = key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.TraditionalOpenSSL,
        encryption_algorithm=serialization.NoEncryption(),
    )
    return key_pem, cert.public_bytes(serialization.Encoding.PEM)

def ensure_self_signed_cert(certs_dir: str | Path) -> Tuple[Path, Path]:
    """
    Return (key_path, cert_path), creating a localhost certificate when either
    file is missing. Existing files are reused untouched.
    """
    key_path, cert_path = cert_paths(certs_dir)
    key_path.parent.mkdir(parents=True, exist_ok=True)
    if key_path.exists() and cert_path.exists():
        return key_path, cert_path

    key_pem, cert_pem = generate_self_signed()
    key_path.write_bytes(key_pem)
    cert_path.write_bytes(cert_pem)
    logger.info(f"Generated self-signed HTTPS certificates in {key_path.parent}.")
    return key_path, cert_path
