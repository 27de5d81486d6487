from zep_vouching import log
from zep_vouching.constants import SEPARATOR
from zep_vouching.network_file import NetworkFile
from zep_vouching.utils import same_address
from zep_vouching.v2_0.fetch import fetch_zep_token
from zep_vouching.v2_1.fetch import fetch_vouching


def verify(network_file: NetworkFile, appeals_resolver: str, constants) -> bool:
    log.info(f"Verifying vouching app on network {network_file.network}...")
    verified = verify_vouching(network_file, appeals_resolver, constants)
    if verified:
        log.info("\n\nVouching instance was deployed and configured successfully!")
    else:
        log.error("\n\nThere was an error while verifying the vouching instance.")
    return verified


def verify_vouching(network_file: NetworkFile, appeals_resolver: str, constants) -> bool:
    log.base(f"\n{SEPARATOR}\n")
    log.base("Verifying new Vouching instance...")

    vouching = fetch_vouching(network_file)
    if not vouching:
        log.error(" ✘ Missing valid instance of Vouching")
        return False

    zep_token = fetch_zep_token(network_file)
    if not zep_token:
        log.error(" ✘ Missing valid instance of ZEPToken")
        return False

    token = vouching.token()
    minimum_stake = vouching.minimumStake()
    appeal_fee = vouching.appealFee()
    vouching_appeals_resolver = vouching.appealsResolver()

    token_matches = same_address(token, zep_token.address)
    minimum_stake_matches = minimum_stake == constants.VOUCHING_MIN_STAKE
    appeal_fee_matches = appeal_fee == constants.VOUCHING_APPEAL_FEE
    appeals_resolver_matches = same_address(vouching_appeals_resolver, appeals_resolver)

    if token_matches:
        log.info(" ✔ Vouching token matches ZEP Token deployed instance")
    else:
        log.error(
            f" ✘ Vouching token {token} does not match ZEP Token deployed instance "
            f"{zep_token.address}"
        )

    if minimum_stake_matches:
        log.info(" ✔ Vouching minimum stake matches requested value")
    else:
        log.error(
            f" ✘ Vouching minimum stake {minimum_stake} does not match requested value, "
            f"it was expected {constants.VOUCHING_MIN_STAKE}"
        )

    if appeal_fee_matches:
        log.info(" ✔ Vouching appeal fee matches requested value")
    else:
        log.error(
            f" ✘ Vouching appeal fee {appeal_fee} does not match requested value, "
            f"it was expected {constants.VOUCHING_APPEAL_FEE}"
        )

    if appeals_resolver_matches:
        log.info(" ✔ Vouching appeals resolver matches requested value")
    else:
        log.error(
            f" ✘ Vouching appeals resolver {vouching_appeals_resolver} does not match "
            f"requested value, it was expected {appeals_resolver}"
        )

    has_tpl_attribute = verify_vouching_has_tpl_attribute(zep_token, vouching, True)

    return (
        token_matches
        and minimum_stake_matches
        and appeal_fee_matches
        and appeals_resolver_matches
        and has_tpl_attribute
    )


def verify_vouching_has_tpl_attribute(zep_token, vouching, log_verifications: bool = False) -> bool:
    vouching_can_receive = zep_token.canReceive(vouching.address)
    if log_verifications:
        if vouching_can_receive:
            log.info(" ✔ Vouching instance has TPL attribute to receive ZEP tokens")
        else:
            log.error(" ✘ Vouching instance does not have TPL attribute to receive ZEP tokens")
    return bool(vouching_can_receive)
